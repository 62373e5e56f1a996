from dataclasses import dataclass
from enum import Enum

class TokenKind(Enum):
    Identifier = 1
    StringLiteral = 2
    Comment = 3
    Operator = 4
    Whitespace = 5
    Other = 6

@dataclass(frozen=True)
class Token:
    """
    A single lexeme from a source file, with the line it starts on
    """
    kind : TokenKind
    text : str
    line : int

    @property
    def is_ignorable(self) -> bool:
        return self.kind in (TokenKind.Whitespace, TokenKind.Comment)

    def Is(self, kind : TokenKind, text : str|None = None) -> bool:
        return self.kind == kind and (text is None or self.text == text)

    def __str__(self) -> str:
        return self.text
