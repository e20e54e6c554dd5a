"""Keyword search over document text."""

from __future__ import annotations

from typing import List

from mdreader.ingestion.markdown_loader import MarkdownConverter
from mdreader.models import SearchResult


def _fold_char(ch: str) -> str:
    # Fold through the upper-case form so that e.g. "ı" and "ſ" meet "I" and "S";
    # characters whose case mapping changes length keep a single-character form.
    upper = ch.upper()
    if len(upper) != 1:
        return ch
    lower = upper.lower()
    return lower if len(lower) == 1 else upper


def _fold(text: str) -> str:
    return "".join(_fold_char(ch) for ch in text)


def search_text(content: str | None, keyword: str | None) -> SearchResult:
    """Find every case-insensitive occurrence of ``keyword`` in ``content``.

    Matches may overlap: after a hit the scan resumes one character later, so
    ``"aa"`` is found twice in ``"aaa"``.
    """
    result = SearchResult(keyword=keyword if keyword is not None else "")
    if not content or not keyword or len(keyword) > len(content):
        return result

    haystack = _fold(content)
    needle = _fold(keyword)

    positions: List[int] = []
    index = haystack.find(needle)
    while index >= 0:
        positions.append(index)
        index = haystack.find(needle, index + 1)

    result.match_positions = positions
    result.total_matches = len(positions)
    return result


class TextSearcher:
    """High-level API to search plain text or Markdown documents."""

    def __init__(self, converter: MarkdownConverter | None = None) -> None:
        self.converter = converter or MarkdownConverter()

    def search(self, content: str | None, keyword: str | None) -> SearchResult:
        return search_text(content, keyword)

    def search_document(self, markdown: str | None, keyword: str | None) -> SearchResult:
        """Search the plain text rendering of a Markdown document."""
        return search_text(self.converter.to_plain_text(markdown), keyword)
