"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path


def read_document(path: Path | str | None) -> str:
    """Read a document as UTF-8 text.

    Raises ``ValueError`` for an empty path and ``FileNotFoundError`` when the
    file does not exist.
    """
    if path is None or not str(path).strip():
        raise ValueError("File path cannot be empty.")

    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    with file_path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_export(content: str, path: Path | str | None) -> Path:
    """Write ``content`` to ``path`` byte for byte, creating parent folders."""
    if not content:
        raise ValueError("Export content cannot be empty.")
    if path is None or not str(path).strip():
        raise ValueError("File path cannot be empty.")

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as handle:
        handle.write(content.encode("utf-8"))
    return target
