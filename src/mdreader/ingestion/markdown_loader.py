"""Markdown conversion utilities.

Uses markdown-it-py for parsing. The converter produces the HTML fragment
shown in the reader, the plain text used for keyword search and the flat list
of heading blocks that feeds the table of contents.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdreader.models import HeadingBlock
from mdreader.utils.text import generate_anchor_id

LOGGER = logging.getLogger(__name__)


def _inline_text(children: Sequence[Token] | None, *, line_breaks: str = " ") -> str:
    """Flatten inline tokens to their literal text content."""
    parts: List[str] = []
    for child in children or ():
        if child.type in ("text", "text_special", "code_inline"):
            parts.append(child.content)
        elif child.type == "image":
            # Alt text lives in the image's own children.
            parts.append(_inline_text(child.children, line_breaks=line_breaks))
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(line_breaks)
    return "".join(parts)


class MarkdownConverter:
    """Thin wrapper around a configured MarkdownIt parser."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])

    def parse(self, markdown: str | None) -> List[Token]:
        if not markdown:
            return []
        return self._md.parse(markdown)

    def to_html(self, markdown: str | None) -> str:
        """Render Markdown to an HTML fragment.

        Headings carry an ``id`` equal to their TOC anchor so the table of
        contents can link into the page.
        """
        tokens = self.parse(markdown)
        if not tokens:
            return ""
        for index, token in enumerate(tokens):
            if token.type == "heading_open" and index + 1 < len(tokens):
                anchor = generate_anchor_id(_inline_text(tokens[index + 1].children))
                if anchor:
                    token.attrSet("id", anchor)
        return self._md.renderer.render(tokens, self._md.options, {})

    def to_plain_text(self, markdown: str | None) -> str:
        """Render Markdown to plain text, one block per line."""
        lines: List[str] = []
        for token in self.parse(markdown):
            if token.type == "inline":
                lines.append(_inline_text(token.children, line_breaks="\n"))
            elif token.type in ("fence", "code_block"):
                lines.append(token.content.rstrip("\n"))
        return "\n".join(lines)

    def extract_headings(self, markdown: str | None) -> List[HeadingBlock]:
        """Return the document headings in order, titles flattened to text."""
        tokens = self.parse(markdown)
        headings: List[HeadingBlock] = []
        for index, token in enumerate(tokens):
            if token.type != "heading_open":
                continue
            level = int(token.tag[1:])
            title = ""
            if index + 1 < len(tokens) and tokens[index + 1].type == "inline":
                title = _inline_text(tokens[index + 1].children)
            headings.append(HeadingBlock(level=level, title=title))
        LOGGER.debug("Extracted %d headings", len(headings))
        return headings
