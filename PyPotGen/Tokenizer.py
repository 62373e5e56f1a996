from typing import Iterator
import regex

from PyPotGen.Token import Token, TokenKind

_line_break = regex.compile(r"\r\n|\r|\n")

_identifier = r"[A-Za-z_\u0080-\U0010FFFF][A-Za-z0-9_\u0080-\U0010FFFF]*"

_code_patterns = [
    ('close_tag', r"\?>(?:\r?\n)?"),
    ('block_comment', r"/\*.*?(?:\*/|\Z)"),
    ('line_comment', r"(?://|\#(?!\[))[^\r\n]*?(?=\?>|\r|\n|\Z)"),
    ('single_quoted', r"'(?:[^'\\]++|\\.)*'"),
    ('double_quoted', r'"(?:[^"\\{]++|\\.|\{\$(?P<braced>(?:[^{}\'"\\]++|\\.|\'(?:[^\'\\]++|\\.)*\'|"(?:[^"\\]++|\\.)*"|\{(?&braced)\})*)\}|\{)*"'),
    ('backtick', r"`(?:[^`\\]++|\\.)*`"),
    ('unterminated', r"['\"`].*"),
    ('heredoc', r"<<<[ \t]*(?P<hq>[\"']?)(?P<label>" + _identifier + r")(?P=hq)\r?\n.*?^[ \t]*(?P=label)(?![A-Za-z0-9_\u0080-\U0010FFFF])"),
    ('variable', r"\$+" + _identifier),
    ('identifier', _identifier),
    ('number', r"0[xX][0-9a-fA-F_]+|0[bB][01_]+|\d[\d_]*(?:\.[\d_]*)?(?:[eE][+-]?\d+)?|\.\d[\d_]*(?:[eE][+-]?\d+)?"),
    ('whitespace', r"\s+"),
    ('operator', r"\?->|\*\*=|\.\.\.|<=>|===|!==|<<=|>>=|\?\?=|->|=>|::|\+\+|--|==|!=|<>|<=|>=|&&|\|\||\?\?|\+=|-=|\*=|/=|\.=|%=|&=|\|=|\^=|<<|>>|\*\*|\#\[|[-+*/%=<>!&|^~?:;,.@\\()\[\]{}]"),
    ('other', r"."),
]

_kinds = {
    'close_tag': TokenKind.Other,
    'block_comment': TokenKind.Comment,
    'line_comment': TokenKind.Comment,
    'single_quoted': TokenKind.StringLiteral,
    'double_quoted': TokenKind.StringLiteral,
    'backtick': TokenKind.Other,
    'unterminated': TokenKind.Other,
    'heredoc': TokenKind.Other,
    'variable': TokenKind.Other,
    'identifier': TokenKind.Identifier,
    'number': TokenKind.Other,
    'whitespace': TokenKind.Whitespace,
    'operator': TokenKind.Operator,
    'other': TokenKind.Other,
}

class Tokenizer:
    """
    Splits PHP source into a flat list of tokens.

    Text outside <?php ... ?> tags is inline HTML and comes out as a single Other token.
    Unterminated comments and strings run to the end of the file; an unterminated string
    is emitted as Other so that it can never be mistaken for a constant.
    """
    open_tag_pattern = regex.compile(r"<\?(?:(?i:php)(?=\s|\Z)|=)")
    code_pattern = regex.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _code_patterns), flags=regex.DOTALL | regex.MULTILINE)

    def Tokenize(self, source : str) -> list[Token]:
        return list(self.IterTokens(source))

    def IterTokens(self, source : str) -> Iterator[Token]:
        position = 0
        line = 1
        in_code = False
        length = len(source)

        while position < length:
            if not in_code:
                match = self.open_tag_pattern.search(source, position)
                end = match.start() if match else length
                if end > position:
                    html = source[position:end]
                    yield Token(TokenKind.Other, html, line)
                    line += self._count_lines(html)

                if not match:
                    break

                yield Token(TokenKind.Other, match.group(), line)
                position = match.end()
                in_code = True
                continue

            match = self.code_pattern.match(source, position)
            if match is None:
                # unreachable, 'other' matches any single character
                break

            name = self._group_name(match)
            text = match.group()
            yield Token(_kinds[name], text, line)

            line += self._count_lines(text)
            position = match.end()

            if name == 'close_tag':
                in_code = False

    def _count_lines(self, text : str) -> int:
        return len(_line_break.findall(text))

    def _group_name(self, match) -> str:
        for name, dummy in _code_patterns:
            if match.group(name) is not None:
                return name
        return 'other'
