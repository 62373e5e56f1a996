import threading
from typing import Iterator

from PyPotGen.CatalogEntry import CatalogEntry, MessageKey, SortKey

class Catalog:
    """
    Collection of unique messages keyed by (context, singular, plural).

    Messages found at several locations are merged into a single entry.
    The catalog only grows; adding is thread safe.
    """
    def __init__(self):
        self._entries : dict[MessageKey, CatalogEntry] = {}
        self.lock = threading.Lock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._entries)

    def __contains__(self, key : object) -> bool:
        with self.lock:
            return key in self._entries

    def Add(self, singular : str, plural : str|None, context : str|None, reference : str, comment : str|None = None) -> CatalogEntry:
        """
        Add a message found at reference, merging it with an existing entry if there is one
        """
        key : MessageKey = (context or None, singular, plural or None)
        with self.lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = CatalogEntry(singular, plural=plural or None, context=context or None)
                self._entries[key] = entry

            entry.AddReference(reference)
            entry.AddComment(comment)
            return entry

    def Get(self, singular : str, plural : str|None = None, context : str|None = None) -> CatalogEntry|None:
        with self.lock:
            return self._entries.get((context or None, singular, plural or None))

    def Clear(self):
        with self.lock:
            self._entries.clear()

    def SortedEntries(self) -> list[CatalogEntry]:
        with self.lock:
            return [ self._entries[key] for key in sorted(self._entries.keys(), key=SortKey) ]

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.SortedEntries())
