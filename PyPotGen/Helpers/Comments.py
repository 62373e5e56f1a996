import regex

translator_marker = 'translators:'

_comment_delimiters = regex.compile(r"/\*+|\*+/")
_line_prefixes = regex.compile(r"^\s*(?://+|\*+|#+)")
_marker_prefix = regex.compile(r"^" + regex.escape(translator_marker) + r"\s*", flags=regex.IGNORECASE)

def IsTranslatorComment(comment : str) -> bool:
    return translator_marker in comment.lower()

def NormalizeTranslatorComment(comment : str) -> str:
    """
    Reduce a source comment to a single line of translator-facing text.

    Comment delimiters and leading //, * or # on each line are removed, the lines are
    joined with spaces and the 'translators:' prefix is dropped.
    """
    comment = _comment_delimiters.sub('', comment)

    lines = [ _line_prefixes.sub('', line).strip() for line in regex.split(r"\r\n|\r|\n", comment) ]
    text = ' '.join(line for line in lines if line)
    text = _marker_prefix.sub('', text)
    return text.strip()
