from PyPotGen.Token import Token, TokenKind

def SplitArguments(tokens : list[Token], start : int) -> tuple[list[list[Token]], int]|None:
    """
    Split the argument list of a call into top-level argument groups.

    :param tokens: the token stream of the file.
    :param start: index of the first token after the call's opening parenthesis.

    :return: the argument groups and the index of the closing parenthesis,
    or None if the argument list is never closed.

    Only parentheses are tracked for nesting; a comma separates arguments when it
    appears at the call's own depth.
    """
    arguments : list[list[Token]] = []
    current : list[Token] = []
    depth = 1

    for index in range(start, len(tokens)):
        token = tokens[index]
        if token.kind == TokenKind.Operator:
            if token.text == '(':
                depth += 1
            elif token.text == ')':
                depth -= 1
                if depth == 0:
                    if any(not item.is_ignorable for item in current):
                        arguments.append(current)
                    return arguments, index
            elif token.text == ',' and depth == 1:
                arguments.append(current)
                current = []
                continue

        current.append(token)

    return None

def FindOpeningParenthesis(tokens : list[Token], index : int) -> int|None:
    """
    Index of the '(' that follows tokens[index], skipping whitespace and comments
    """
    for position in range(index + 1, len(tokens)):
        token = tokens[position]
        if token.is_ignorable:
            continue
        return position if token.Is(TokenKind.Operator, '(') else None
    return None

def PreviousSignificantToken(tokens : list[Token], index : int) -> Token|None:
    for position in range(index - 1, -1, -1):
        if not tokens[position].is_ignorable:
            return tokens[position]
    return None
