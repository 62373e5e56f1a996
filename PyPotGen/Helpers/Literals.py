"""
Resolution of PHP string literal expressions to constant strings.

Only constant expressions are resolved: quoted literals joined by the '.' operator,
optionally wrapped in grouping parentheses. Anything that depends on runtime state
(variables, function calls, interpolated double-quoted strings) resolves to None.
"""
import regex

from PyPotGen.Token import Token, TokenKind

_single_quoted_escape = regex.compile(r"\\([\\'])")

_double_quoted_part = regex.compile(
    r"(?P<octal>\\[0-7]{1,3})"
    r"|(?P<hex>\\x[0-9A-Fa-f]{1,2})"
    r"|(?P<unicode>\\u\{[0-9A-Fa-f]+\})"
    r"|(?P<escape>\\.)"
    r"|(?P<interpolation>\$(?=[A-Za-z_\u0080-\U0010FFFF{]))"
    r"|(?P<text>[^\\$]+|\$|\\)",
    flags=regex.DOTALL)

_simple_escapes = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'v': '\v',
    'e': '\x1b',
    'f': '\f',
    '\\': '\\',
    '$': '$',
    '"': '"',
}

def DecodeSingleQuoted(body : str) -> str:
    """
    Only \\\\ and \\' are escapes in a single-quoted literal, everything else is verbatim
    apart from raw line endings, which become \\n
    """
    body = body.replace('\r\n', '\n').replace('\r', '\n')
    return _single_quoted_escape.sub(lambda m: m.group(1), body)

def DecodeDoubleQuoted(body : str) -> str|None:
    """
    Decode the escape sequences of a double-quoted literal body.

    :return: the decoded string, or None if the body interpolates a variable.
    """
    body = body.replace('\r\n', '\n').replace('\r', '\n')
    buffer = bytearray()

    for match in _double_quoted_part.finditer(body):
        if match.group('interpolation') is not None:
            return None

        if match.group('octal') is not None:
            buffer.append(int(match.group('octal')[1:], 8) & 0xFF)
        elif match.group('hex') is not None:
            buffer.append(int(match.group('hex')[2:], 16))
        elif match.group('unicode') is not None:
            codepoint = int(match.group('unicode')[3:-1], 16)
            if codepoint > 0x10FFFF:
                return None
            buffer.extend(chr(codepoint).encode('utf-8', errors='surrogatepass'))
        elif match.group('escape') is not None:
            escaped = match.group('escape')
            buffer.extend(_simple_escapes.get(escaped[1], escaped).encode('utf-8'))
        else:
            buffer.extend(match.group('text').encode('utf-8', errors='surrogatepass'))

    return buffer.decode('utf-8', errors='replace')

def InterpretLiteral(literal : str) -> str|None:
    """
    Decode a quoted literal, including its quotes, into its value
    """
    if len(literal) < 2 or literal[0] != literal[-1]:
        return None

    quote = literal[0]
    body = literal[1:-1]

    if quote == "'":
        return DecodeSingleQuoted(body)

    if quote == '"':
        return DecodeDoubleQuoted(body)

    return None

def ResolveLiteral(tokens : list[Token]) -> str|None:
    """
    Resolve an argument to a constant string.

    :return: the concatenated value, or None if any part of the argument is not constant
    or the value is empty.
    """
    value = ''

    for token in tokens:
        if token.is_ignorable:
            continue

        if token.kind == TokenKind.StringLiteral:
            segment = InterpretLiteral(token.text)
            if segment is None:
                return None
            value += segment
            continue

        if token.kind == TokenKind.Operator and token.text in ('.', '(', ')'):
            continue

        return None

    return value or None
