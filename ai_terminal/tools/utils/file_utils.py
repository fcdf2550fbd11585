from .constants import QUOTE_CHARS


def take_lines(content: str, count: int, from_end: bool = False) -> str:
    """First (or last) `count` lines of `content`, split and rejoined on newline."""
    lines = content.split("\n")
    if count <= 0:
        return ""
    selected = lines[-count:] if from_end else lines[:count]
    return "\n".join(selected)


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    if text[:1] and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text[-1:] and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text
