import os

def GetRelativeReference(path : str, base_path : str) -> str:
    """
    Path of a source file relative to the base path, with forward slashes.
    Paths outside the base path are returned unchanged.
    """
    normalized_base = base_path.replace('\\', '/').rstrip('/') + '/'
    normalized_path = path.replace('\\', '/')

    if normalized_path.startswith(normalized_base):
        return normalized_path[len(normalized_base):].lstrip('/')

    return path

def NormalizeExtension(extension : str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith('.'):
        extension = f".{extension}"
    return extension

def IsHidden(name : str) -> bool:
    return name.startswith('.')

def GetDefaultOutputPath(base_path : str, domain : str) -> str:
    return os.path.join(base_path, 'languages', f"{domain}.pot")
