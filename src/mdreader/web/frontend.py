"""HTML frontend for the mdreader web UI."""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from mdreader.config import AppConfig
from mdreader.ingestion.markdown_loader import MarkdownConverter
from mdreader.render.page import build_full_html
from mdreader.settings.storage import SettingsStore
from mdreader.settings.theme import ThemeService
from mdreader.utils.files import read_document

router = APIRouter()


def _load_template() -> str:
    template = files("mdreader.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    html = _load_template()
    return HTMLResponse(content=html)


@router.get("/view", response_class=HTMLResponse)
async def view(path: str, settings: Path | None = None) -> HTMLResponse:
    try:
        markdown = read_document(path)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    config = AppConfig(settings_path=settings)
    theme = ThemeService(SettingsStore(config.resolve_settings_path(Path.cwd()))).load_saved()
    html = build_full_html(MarkdownConverter().to_html(markdown), theme, title=Path(path).stem)
    return HTMLResponse(content=html)
