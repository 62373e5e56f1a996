class PotError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.error = error
        self.message = message

    def __str__(self) -> str:
        if self.error:
            return f"{self.message}: {self.error}" if self.message else str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class SourceNotFoundError(PotError):
    def __init__(self, path : str):
        super().__init__(f"Source directory not found: {path}")
        self.path = path

class SourceReadError(PotError):
    """ A single source file could not be read. Recoverable, the file is skipped """
    def __init__(self, path : str, error : Exception|None = None):
        super().__init__(f"Unable to read {path}", error)
        self.path = path

class PotWriteError(PotError):
    """ The template could not be written. Callers may fall back to another extraction tool """
    def __init__(self, destination : str, error : Exception|None = None):
        super().__init__(f"Unable to write translation template to {destination}", error)
        self.destination = destination

class SettingsError(PotError):
    """Raised when a setting cannot be coerced to the expected type."""
    pass
