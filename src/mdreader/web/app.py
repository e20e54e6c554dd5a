"""FastAPI application backing the mdreader web UI."""

from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from mdreader.config import AppConfig
from mdreader.index.search import TextSearcher
from mdreader.ingestion.markdown_loader import MarkdownConverter
from mdreader.outline.builder import build_hierarchy
from mdreader.render.page import build_full_html
from mdreader.settings.recent import RecentFiles
from mdreader.settings.storage import SettingsStore
from mdreader.settings.theme import ThemeService
from mdreader.utils.files import read_document, write_export
from mdreader.utils.text import make_snippet
from mdreader.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".html", ".htm")

app = FastAPI(title="mdreader Web", version="0.1.0")
app.include_router(frontend_router)


class OpenRequest(BaseModel):
    path: str
    settings: Path | None = None


class TocPayload(BaseModel):
    markdown: str


class SearchPayload(BaseModel):
    keyword: str
    content: str | None = None
    path: str | None = None


class ExportPayload(BaseModel):
    path: str
    output: str
    settings: Path | None = None


def _config(settings: Path | None) -> AppConfig:
    if settings is not None and settings.suffix.lower() != ".json":
        raise HTTPException(status_code=400, detail="Settings file must be a .json file")
    return AppConfig(settings_path=settings)


def _resolve_settings_path(settings: Path | None) -> Path:
    return _config(settings).resolve_settings_path(Path.cwd())


def _recent_files(settings: Path | None) -> RecentFiles:
    config = _config(settings)
    store = SettingsStore(config.resolve_settings_path(Path.cwd()))
    return RecentFiles(store, max_items=config.max_recent_files)


def _load_document(path: str | None) -> str:
    try:
        return read_document(path)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/open")
async def open_document(payload: OpenRequest) -> dict[str, Any]:
    markdown = _load_document(payload.path)

    recent = _recent_files(payload.settings)
    recent.add(payload.path)

    converter = MarkdownConverter()
    toc = build_hierarchy(converter.extract_headings(markdown))
    return {
        "path": payload.path,
        "html": converter.to_html(markdown),
        "toc": [asdict(node) for node in toc],
    }


@app.post("/toc")
async def table_of_contents(payload: TocPayload) -> dict[str, Any]:
    toc = build_hierarchy(MarkdownConverter().extract_headings(payload.markdown))
    return {"toc": [asdict(node) for node in toc]}


@app.post("/search")
async def search_document(payload: SearchPayload) -> dict[str, Any]:
    searcher = TextSearcher()
    if payload.content is not None:
        content = payload.content
    elif payload.path is not None:
        content = searcher.converter.to_plain_text(_load_document(payload.path))
    else:
        raise HTTPException(status_code=400, detail="Either content or path must be provided")

    result = searcher.search(content, payload.keyword)
    snippets = [
        make_snippet(content, position, len(payload.keyword), radius=AppConfig().search_context)
        for position in result.match_positions
    ]
    return {**asdict(result), "snippets": snippets}


@app.get("/recent")
async def list_recent(settings: Path | None = None) -> dict[str, Any]:
    recent = _recent_files(settings)
    return {"recent": list(recent.entries())}


@app.get("/theme")
async def get_theme(settings: Path | None = None) -> dict[str, str]:
    service = ThemeService(SettingsStore(_resolve_settings_path(settings)))
    return {"theme": service.load_saved().value}


@app.post("/theme/toggle")
async def toggle_theme(settings: Path | None = None) -> dict[str, str]:
    service = ThemeService(SettingsStore(_resolve_settings_path(settings)))
    service.load_saved()
    return {"theme": service.toggle().value}


@app.post("/export")
async def export_document(payload: ExportPayload) -> dict[str, str]:
    if Path(payload.output).suffix.lower() not in EXPORT_SUFFIXES:
        raise HTTPException(status_code=400, detail="Export output must be an .html file")
    markdown = _load_document(payload.path)
    theme = ThemeService(SettingsStore(_resolve_settings_path(payload.settings))).load_saved()

    html = build_full_html(MarkdownConverter().to_html(markdown), theme, title=Path(payload.path).stem)
    try:
        target = write_export(html, payload.output)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OSError as exc:
        LOGGER.error("Unable to export %s: %s", payload.path, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"status": "ok", "output": str(target)}
