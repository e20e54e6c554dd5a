"""Text helpers: heading slugs and search snippets."""

from __future__ import annotations

import re

_SPECIAL_CHARS_RE = re.compile(r"[^a-z0-9\-]")
_MULTIPLE_HYPHENS_RE = re.compile(r"-{2,}")


def generate_anchor_id(title: str | None) -> str:
    """Turn a heading title into a URL fragment identifier.

    Identical titles produce identical ids; no numeric suffix is appended.
    """
    if not title or not title.strip():
        return ""

    anchor = title.lower().replace(" ", "-")
    anchor = _SPECIAL_CHARS_RE.sub("", anchor)
    anchor = _MULTIPLE_HYPHENS_RE.sub("-", anchor)
    return anchor.strip("-")


def make_snippet(content: str, position: int, length: int, *, radius: int = 40) -> str:
    """Return a single-line excerpt of ``content`` around a match."""
    if not content:
        return ""

    start = max(position - radius, 0)
    end = min(position + length + radius, len(content))
    excerpt = " ".join(content[start:end].split())
    if start > 0:
        excerpt = "..." + excerpt
    if end < len(content):
        excerpt = excerpt + "..."
    return excerpt
