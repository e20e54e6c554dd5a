"""Table of contents construction."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from mdreader.ingestion.markdown_loader import MarkdownConverter
from mdreader.models import HeadingBlock, TocNode
from mdreader.utils.text import generate_anchor_id


def build_hierarchy(headings: Iterable[HeadingBlock]) -> List[TocNode]:
    """Nest a flat heading sequence into a forest of TOC nodes.

    Each heading becomes a child of the nearest preceding heading with a lower
    level. Skipped levels are not filled in: an H4 right after an H1 is a
    direct child of that H1.
    """
    roots: List[TocNode] = []
    stack: List[TocNode] = []

    for heading in headings:
        node = TocNode(
            title=heading.title,
            level=heading.level,
            anchor_id=generate_anchor_id(heading.title),
        )

        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def flatten_toc(nodes: Iterable[TocNode]) -> Iterator[TocNode]:
    """Yield nodes in pre-order."""
    for node in nodes:
        yield node
        yield from flatten_toc(node.children)


def generate_toc(markdown: str | None, converter: MarkdownConverter | None = None) -> List[TocNode]:
    """Build the table of contents of a Markdown document."""
    if not markdown:
        return []
    converter = converter or MarkdownConverter()
    return build_hierarchy(converter.extract_headings(markdown))
