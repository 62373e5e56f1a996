from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

class SignatureKind(Enum):
    Single = 1
    Context = 2
    Plural = 3
    PluralContext = 4

@dataclass(frozen=True)
class ArgumentRoles:
    """
    Which positional arguments of a translation function carry which part of the message.
    Indices are zero-based; the singular is always argument 0.
    """
    kind : SignatureKind
    plural_index : int|None = None
    context_index : int|None = None
    domain_index : int|None = None
    method_call_tolerant : bool = False

    @property
    def has_plural(self) -> bool:
        return self.kind in (SignatureKind.Plural, SignatureKind.PluralContext)

    @property
    def has_context(self) -> bool:
        return self.kind in (SignatureKind.Context, SignatureKind.PluralContext)

_single = ArgumentRoles(SignatureKind.Single, domain_index=1)
_context = ArgumentRoles(SignatureKind.Context, context_index=1, domain_index=2)

default_signatures : dict[str, ArgumentRoles] = {
    '__': _single,
    '_e': _single,
    'esc_html__': _single,
    'esc_attr__': _single,
    'esc_html_e': _single,
    'esc_attr_e': _single,
    # commonly called as $this->translate() as well as a free function
    'translate': ArgumentRoles(SignatureKind.Single, method_call_tolerant=True),
    '_x': _context,
    '_ex': _context,
    'esc_html_x': _context,
    'esc_attr_x': _context,
    '_n': ArgumentRoles(SignatureKind.Plural, plural_index=1, domain_index=3),
    '_n_noop': ArgumentRoles(SignatureKind.Plural, plural_index=1, domain_index=2),
    '_nx': ArgumentRoles(SignatureKind.PluralContext, plural_index=1, context_index=2, domain_index=4),
    '_nx_noop': ArgumentRoles(SignatureKind.PluralContext, plural_index=1, context_index=2, domain_index=3),
}

class SignatureRegistry:
    """
    Read-only lookup of the functions whose calls mark text for translation
    """
    def __init__(self, signatures : Mapping[str, ArgumentRoles]|None = None):
        self._signatures : Mapping[str, ArgumentRoles] = MappingProxyType(dict(signatures if signatures is not None else default_signatures))

    def Get(self, name : str) -> ArgumentRoles|None:
        return self._signatures.get(name)

    def __contains__(self, name : object) -> bool:
        return name in self._signatures

    def __len__(self) -> int:
        return len(self._signatures)
