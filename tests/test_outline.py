"""Tests for table of contents construction."""

from __future__ import annotations

import random
from typing import List

import pytest

from mdreader.models import HeadingBlock, TocNode
from mdreader.outline.builder import build_hierarchy, flatten_toc, generate_toc


def _shape(nodes: List[TocNode]) -> list:
    return [
        {"title": n.title, "level": n.level, "children": _shape(n.children)} for n in nodes
    ]


def _headings(*pairs: tuple) -> List[HeadingBlock]:
    return [HeadingBlock(level=level, title=title) for level, title in pairs]


class TestBuildHierarchy:
    """Test build_hierarchy function."""

    def test_siblings_and_roots(self) -> None:
        """Should nest H2s under the preceding H1."""
        nodes = build_hierarchy(_headings((1, "Intro"), (2, "A"), (2, "B"), (1, "Next")))

        assert _shape(nodes) == [
            {
                "title": "Intro",
                "level": 1,
                "children": [
                    {"title": "A", "level": 2, "children": []},
                    {"title": "B", "level": 2, "children": []},
                ],
            },
            {"title": "Next", "level": 1, "children": []},
        ]

    def test_level_skip_nests_directly(self) -> None:
        """An H4 right after an H1 becomes its direct child."""
        nodes = build_hierarchy(_headings((1, "Top"), (4, "Deep"), (2, "Mid")))

        assert len(nodes) == 1
        assert [c.title for c in nodes[0].children] == ["Deep", "Mid"]
        assert nodes[0].children[0].level == 4

    def test_deeper_first_heading(self) -> None:
        """Documents starting below H1 still produce roots."""
        nodes = build_hierarchy(_headings((3, "Three"), (2, "Two"), (3, "Child")))

        assert [n.title for n in nodes] == ["Three", "Two"]
        assert [c.title for c in nodes[1].children] == ["Child"]

    def test_anchor_ids(self) -> None:
        """Should derive anchors from titles."""
        nodes = build_hierarchy(_headings((1, "Getting Started"), (2, "What's New?")))

        assert nodes[0].anchor_id == "getting-started"
        assert nodes[0].children[0].anchor_id == "whats-new"

    def test_duplicate_titles_share_anchor(self) -> None:
        """Duplicate titles keep identical anchors."""
        nodes = build_hierarchy(_headings((2, "Usage"), (2, "Usage")))

        assert nodes[0].anchor_id == nodes[1].anchor_id == "usage"

    def test_empty_title(self) -> None:
        """Empty titles give an empty anchor."""
        nodes = build_hierarchy(_headings((1, "")))

        assert nodes[0].anchor_id == ""

    def test_empty_input(self) -> None:
        """Should return an empty forest."""
        assert build_hierarchy([]) == []

    def test_accepts_iterators(self) -> None:
        """Should work with any iterable of headings."""
        nodes = build_hierarchy(iter(_headings((1, "A"), (2, "B"))))

        assert _shape(nodes)[0]["children"][0]["title"] == "B"

    @pytest.mark.parametrize("seed", range(25))
    def test_flatten_round_trip(self, seed: int) -> None:
        """Pre-order flattening reproduces the input sequence."""
        rng = random.Random(seed)
        headings = [
            HeadingBlock(level=rng.randint(1, 6), title=f"h{index}")
            for index in range(rng.randint(0, 40))
        ]

        flat = list(flatten_toc(build_hierarchy(headings)))

        assert len(flat) == len(headings)
        assert [(n.title, n.level) for n in flat] == [(h.title, h.level) for h in headings]

    @pytest.mark.parametrize("seed", range(25))
    def test_children_have_greater_level(self, seed: int) -> None:
        """Every child is deeper than its parent."""
        rng = random.Random(seed)
        headings = [HeadingBlock(level=rng.randint(1, 6), title=str(i)) for i in range(30)]

        for node in flatten_toc(build_hierarchy(headings)):
            assert all(child.level > node.level for child in node.children)


class TestGenerateToc:
    """Test generate_toc function."""

    def test_from_markdown(self) -> None:
        """Should build the tree from a Markdown document."""
        markdown = "# Intro\n\n## A\n\n## B\n\n# Next\n"

        nodes = generate_toc(markdown)

        assert [n.title for n in nodes] == ["Intro", "Next"]
        assert [c.title for c in nodes[0].children] == ["A", "B"]
        assert nodes[0].anchor_id == "intro"

    @pytest.mark.parametrize("markdown", ["", None, "no headings here"])
    def test_without_headings(self, markdown: str | None) -> None:
        """Should return an empty list."""
        assert generate_toc(markdown) == []
