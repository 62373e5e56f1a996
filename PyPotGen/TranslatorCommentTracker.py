from PyPotGen.Helpers.Comments import IsTranslatorComment, NormalizeTranslatorComment
from PyPotGen.Token import Token, TokenKind

class TranslatorCommentTracker:
    """
    Remembers the translator comment that immediately precedes a translation call.

    A comment is only pending until the next significant token: if that token starts a
    successful extraction the comment is taken, otherwise it is discarded.
    """
    def __init__(self):
        self._pending : str|None = None

    @property
    def pending(self) -> str|None:
        return self._pending

    def Reset(self):
        self._pending = None

    def Observe(self, token : Token):
        """
        Update the pending comment for a token that is not part of an extraction
        """
        if token.kind == TokenKind.Whitespace:
            return

        if token.kind == TokenKind.Comment and IsTranslatorComment(token.text):
            self._pending = NormalizeTranslatorComment(token.text) or None
        else:
            self._pending = None

    def Take(self) -> str|None:
        """
        Claim the pending comment for a successful extraction
        """
        comment = self._pending
        self._pending = None
        return comment
