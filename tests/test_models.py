"""Tests for core data models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from mdreader.models import AppSettings, HeadingBlock, SearchResult, Theme, TocNode


class TestTheme:
    """Test Theme enum."""

    def test_values(self) -> None:
        """Should serialize as Light and Dark."""
        assert Theme.LIGHT.value == "Light"
        assert Theme.DARK.value == "Dark"

    def test_toggled(self) -> None:
        """Should flip between the two members."""
        assert Theme.LIGHT.toggled() is Theme.DARK
        assert Theme.DARK.toggled() is Theme.LIGHT


class TestTocNode:
    """Test TocNode dataclass."""

    def test_defaults(self) -> None:
        """Should start without anchor and children."""
        node = TocNode(title="Intro", level=1)

        assert node.anchor_id == ""
        assert node.children == []

    def test_children_are_not_shared(self) -> None:
        """Each node owns its own children list."""
        first = TocNode(title="A", level=1)
        second = TocNode(title="B", level=1)
        first.children.append(TocNode(title="C", level=2))

        assert second.children == []


class TestHeadingBlock:
    """Test HeadingBlock dataclass."""

    def test_equality(self) -> None:
        """Should compare by value."""
        assert HeadingBlock(level=2, title="A") == HeadingBlock(level=2, title="A")
        assert HeadingBlock(level=2, title="A") != HeadingBlock(level=3, title="A")


class TestSearchResult:
    """Test SearchResult dataclass."""

    def test_defaults(self) -> None:
        """An empty result has no matches."""
        result = SearchResult()

        assert result.keyword == ""
        assert result.total_matches == 0
        assert result.match_positions == []


class TestAppSettings:
    """Test the settings document model."""

    def test_defaults(self) -> None:
        """Should default to light theme and no recent files."""
        settings = AppSettings()

        assert settings.theme is Theme.LIGHT
        assert settings.recent_files == []

    def test_serializes_with_aliases(self) -> None:
        """Should use the Theme/RecentFiles keys on disk."""
        settings = AppSettings(theme=Theme.DARK, recent_files=["a.md"])

        data = json.loads(settings.model_dump_json(by_alias=True))

        assert data == {"Theme": "Dark", "RecentFiles": ["a.md"]}

    def test_parses_aliases(self) -> None:
        """Should read the on-disk keys."""
        settings = AppSettings.model_validate_json('{"Theme": "Dark", "RecentFiles": ["x.md"]}')

        assert settings.theme is Theme.DARK
        assert settings.recent_files == ["x.md"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(0, Theme.LIGHT), (1, Theme.DARK), ("dark", Theme.DARK), (" LIGHT ", Theme.LIGHT)],
    )
    def test_theme_coercion(self, raw: object, expected: Theme) -> None:
        """Should accept enumerant indexes and any casing."""
        assert AppSettings.model_validate({"Theme": raw}).theme is expected

    def test_rejects_unknown_theme(self) -> None:
        """Should refuse values outside Light/Dark."""
        with pytest.raises(ValidationError):
            AppSettings.model_validate({"Theme": "Sepia"})

    def test_null_recent_files(self) -> None:
        """A null list is read as empty."""
        assert AppSettings.model_validate({"RecentFiles": None}).recent_files == []
