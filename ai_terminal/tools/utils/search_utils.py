import re
from dataclasses import dataclass


@dataclass
class SearchResult:
    line: str
    line_number: int
    spans: list[tuple[int, int]]


def find_spans(line: str, needle: str) -> list[tuple[int, int]]:
    """Non-overlapping (start, end) spans of `needle` in `line`, ignoring case."""
    if not needle:
        return []
    # offsets come from `line` itself; folding a copy can shift them (e.g. "İ")
    return [match.span() for match in re.finditer(re.escape(needle), line, re.IGNORECASE)]


def search_content(content: str, pattern: str) -> list[SearchResult]:
    """
    Case-insensitive substring search over the lines of a file.

    The pattern is matched literally, not as a regular expression.

    Args:
        content: The file content; lines are split on newline.
        pattern: The substring to look for.

    Returns:
        One SearchResult per matching line, in file order.
    """
    results: list[SearchResult] = []
    for index, line in enumerate(content.split("\n")):
        spans = find_spans(line, pattern)
        if spans:
            results.append(SearchResult(line=line, line_number=index + 1, spans=spans))
    return results
