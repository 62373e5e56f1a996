import logging
from dataclasses import dataclass

from PyPotGen.FunctionSignatures import ArgumentRoles, SignatureRegistry
from PyPotGen.Helpers.Arguments import FindOpeningParenthesis, PreviousSignificantToken, SplitArguments
from PyPotGen.Helpers.Literals import ResolveLiteral
from PyPotGen.Token import Token, TokenKind
from PyPotGen.TranslatorCommentTracker import TranslatorCommentTracker

member_access_operators = ('->', '?->', '::')

@dataclass
class ExtractedMessage:
    """
    A translatable message found at one call site
    """
    singular : str
    line : int
    plural : str|None = None
    context : str|None = None
    comment : str|None = None

class CallScanner:
    """
    Finds calls to registered translation functions in a token stream and extracts
    the messages whose arguments are constant strings.
    """
    def __init__(self, domain : str|None, registry : SignatureRegistry|None = None):
        self.domain = domain
        self.registry = registry or SignatureRegistry()

    def Scan(self, tokens : list[Token]) -> list[ExtractedMessage]:
        """
        Extract every message in the token stream of one file.

        Calls that cannot be resolved statically are skipped. Scanning resumes after the
        closing parenthesis of each registered call, so registered calls nested in the
        arguments of another registered call are not visited.
        """
        tracker = TranslatorCommentTracker()
        messages : list[ExtractedMessage] = []
        index = 0

        while index < len(tokens):
            token = tokens[index]
            roles = self.registry.Get(token.text) if token.kind == TokenKind.Identifier else None
            if roles is None:
                tracker.Observe(token)
                index += 1
                continue

            opening = FindOpeningParenthesis(tokens, index)
            if opening is None:
                tracker.Observe(token)
                index += 1
                continue

            if self._is_member_call(tokens, index) and not roles.method_call_tolerant:
                logging.debug(f"Skipping method call to {token.text} at line {token.line}")
                tracker.Reset()
                index += 1
                continue

            split = SplitArguments(tokens, opening + 1)
            if split is None:
                logging.debug(f"Unterminated call to {token.text} at line {token.line}")
                tracker.Reset()
                index += 1
                continue

            arguments, closing = split
            comment = tracker.Take()

            message = self._extract_message(roles, arguments, token.line)
            if message:
                message.comment = comment
                messages.append(message)
            else:
                logging.debug(f"No constant message in call to {token.text} at line {token.line}")

            index = closing + 1

        return messages

    def DomainMatches(self, arguments : list[list[Token]], roles : ArgumentRoles) -> bool:
        """
        Whether the call belongs to the configured domain.

        A call without a domain argument, or whose domain is not a constant, is
        treated as matching.
        """
        if self.domain is None or roles.domain_index is None:
            return True

        if roles.domain_index >= len(arguments):
            return True

        domain = ResolveLiteral(arguments[roles.domain_index])
        if domain is None:
            return True

        return domain == self.domain

    def _extract_message(self, roles : ArgumentRoles, arguments : list[list[Token]], line : int) -> ExtractedMessage|None:
        if not arguments or not self.DomainMatches(arguments, roles):
            return None

        singular = self._resolve_argument(arguments, 0)
        if singular is None:
            return None

        message = ExtractedMessage(singular=singular, line=line)

        if roles.has_plural:
            message.plural = self._resolve_argument(arguments, roles.plural_index)
            if message.plural is None:
                return None

        if roles.has_context:
            message.context = self._resolve_argument(arguments, roles.context_index)
            if message.context is None:
                return None

        return message

    def _resolve_argument(self, arguments : list[list[Token]], index : int|None) -> str|None:
        if index is None or index >= len(arguments):
            return None
        return ResolveLiteral(arguments[index])

    def _is_member_call(self, tokens : list[Token], index : int) -> bool:
        previous = PreviousSignificantToken(tokens, index)
        return previous is not None and previous.kind == TokenKind.Operator and previous.text in member_access_operators
