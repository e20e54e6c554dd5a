"""Core mdreader data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Theme(str, Enum):
    """Reader colour scheme."""

    LIGHT = "Light"
    DARK = "Dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


@dataclass(frozen=True, slots=True)
class HeadingBlock:
    """A heading as reported by the Markdown converter."""

    level: int
    title: str


@dataclass(slots=True)
class TocNode:
    """Entry of the table of contents tree."""

    title: str
    level: int
    anchor_id: str = ""
    children: List["TocNode"] = field(default_factory=list)


@dataclass(slots=True)
class SearchResult:
    """Outcome of a keyword search over plain text."""

    keyword: str = ""
    total_matches: int = 0
    match_positions: List[int] = field(default_factory=list)


class AppSettings(BaseModel):
    """Settings document shared by the recent files list and the theme.

    Serialized as ``{"Theme": "Light", "RecentFiles": [...]}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    theme: Theme = Field(default=Theme.LIGHT, alias="Theme")
    recent_files: List[str] = Field(default_factory=list, alias="RecentFiles")

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, value: Any) -> Any:
        # Older settings files store the enumerant index.
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(Theme)
            if 0 <= value < len(members):
                return members[value]
            return value
        if isinstance(value, str):
            for member in Theme:
                if member.value.lower() == value.strip().lower():
                    return member
        return value

    @field_validator("recent_files", mode="before")
    @classmethod
    def _coerce_recent_files(cls, value: Any) -> Any:
        if value is None:
            return []
        return value
