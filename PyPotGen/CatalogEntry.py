key_separator = '\x04'

MessageKey = tuple[str|None, str, str|None]

def SortKey(key : MessageKey) -> bytes:
    """
    Byte-wise sort key: context, singular and plural joined by a separator that
    cannot occur in ordinary text
    """
    context, singular, plural = key
    return key_separator.join((context or '', singular, plural or '')).encode('utf-8', errors='surrogatepass')

class CatalogEntry:
    """
    One unique message with every place it was found and every comment attached to it
    """
    def __init__(self, singular : str, plural : str|None = None, context : str|None = None):
        self.singular : str = singular
        self.plural : str|None = plural
        self.context : str|None = context
        self.references : list[str] = []
        self.comments : dict[str, str] = {}

    @property
    def key(self) -> MessageKey:
        return (self.context, self.singular, self.plural)

    @property
    def is_plural(self) -> bool:
        return bool(self.plural)

    def AddReference(self, reference : str):
        if reference not in self.references:
            self.references.append(reference)

    def AddComment(self, comment : str|None):
        if comment:
            self.comments[comment] = comment

    def __repr__(self) -> str:
        return f"CatalogEntry({self.key!r}, references={self.references!r})"
