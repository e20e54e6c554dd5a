"""Command line interface for mdreader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mdreader.config import AppConfig
from mdreader.index.search import TextSearcher
from mdreader.ingestion.markdown_loader import MarkdownConverter
from mdreader.models import Theme, TocNode
from mdreader.outline.builder import build_hierarchy, flatten_toc
from mdreader.render.page import build_full_html
from mdreader.settings.recent import RecentFiles
from mdreader.settings.storage import SettingsStore
from mdreader.settings.theme import ThemeService
from mdreader.utils.files import read_document, write_export
from mdreader.utils.text import make_snippet
from mdreader.web.app import app as web_app


console = Console()
app = typer.Typer(help="mdreader - read, outline and search Markdown documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _settings_store(settings: Optional[Path]) -> SettingsStore:
    config = AppConfig(settings_path=settings)
    return SettingsStore(config.resolve_settings_path(Path.cwd()))


def _recent_files(settings: Optional[Path]) -> RecentFiles:
    config = AppConfig(settings_path=settings)
    store = SettingsStore(config.resolve_settings_path(Path.cwd()))
    return RecentFiles(store, max_items=config.max_recent_files)


def _load_document(path: Path) -> str:
    try:
        return read_document(path)
    except (ValueError, FileNotFoundError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _add_nodes(branch: Tree, nodes: Iterable[TocNode]) -> None:
    for node in nodes:
        title = escape(node.title)
        label = f"[bold]{title}[/bold]" if node.level == 1 else title
        if node.anchor_id:
            label += f" [dim]#{node.anchor_id}[/dim]"
        _add_nodes(branch.add(label), node.children)


@app.command()
def toc(
    path: Path = typer.Argument(..., help="Markdown file", resolve_path=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the table of contents of a document."""
    _setup_logging(verbose)
    markdown = _load_document(path)

    nodes = build_hierarchy(MarkdownConverter().extract_headings(markdown))
    if not nodes:
        console.print("[yellow]No headings found.[/yellow]")
        return

    tree = Tree(f"[bold]{escape(path.name)}[/bold]")
    _add_nodes(tree, nodes)
    console.print(tree)


@app.command()
def search(
    path: Path = typer.Argument(..., help="Markdown file", resolve_path=True),
    keyword: str = typer.Argument(..., help="Keyword to look for"),
    context: Optional[int] = typer.Option(
        None, help="Characters of context per hit; defaults to the configured radius"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find every occurrence of a keyword in a document."""
    _setup_logging(verbose)
    markdown = _load_document(path)

    searcher = TextSearcher()
    content = searcher.converter.to_plain_text(markdown)
    result = searcher.search(content, keyword)
    if not result.total_matches:
        console.print("[yellow]No matches found.[/yellow]")
        return

    radius = context if context is not None else AppConfig().search_context
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Offset")
    table.add_column("Snippet")

    for number, position in enumerate(result.match_positions, start=1):
        snippet = make_snippet(content, position, len(keyword), radius=radius)
        table.add_row(str(number), str(position), escape(snippet))

    console.print(table)
    console.print(f"Found {result.total_matches} matches for [bold]{escape(result.keyword)}[/bold]")


@app.command("open")
def open_document(
    path: Path = typer.Argument(..., help="Markdown file", resolve_path=True),
    settings: Path = typer.Option(None, "--settings", help="Settings file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Open a document and remember it in the recent files list."""
    _setup_logging(verbose)
    markdown = _load_document(path)

    recent = _recent_files(settings)
    recent.add(str(path))

    headings = list(flatten_toc(build_hierarchy(MarkdownConverter().extract_headings(markdown))))
    console.print(f"Opened [bold]{path}[/bold]")
    console.print(f"Characters: {len(markdown)}, headings: {len(headings)}")


@app.command()
def recent(
    settings: Path = typer.Option(None, "--settings", help="Settings file path"),
) -> None:
    """List recently opened documents."""
    entries = _recent_files(settings).entries()
    if not entries:
        console.print("[yellow]No recent files.[/yellow]")
        return

    for number, entry in enumerate(entries, start=1):
        console.print(f"{number:>2}. {entry}")


@app.command()
def theme(
    toggle: bool = typer.Option(False, "--toggle", help="Switch between light and dark"),
    settings: Path = typer.Option(None, "--settings", help="Settings file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show or toggle the reader theme."""
    _setup_logging(verbose)
    service = ThemeService(_settings_store(settings))
    service.load_saved()
    if toggle:
        service.toggle()
    console.print(f"Theme: [bold]{service.current.value}[/bold]")


@app.command()
def export(
    path: Path = typer.Argument(..., help="Markdown file", resolve_path=True),
    output: Path = typer.Argument(..., help="Destination HTML file"),
    theme_name: Optional[str] = typer.Option(
        None, "--theme", help="light or dark; defaults to the saved theme"
    ),
    settings: Path = typer.Option(None, "--settings", help="Settings file path"),
) -> None:
    """Export a document as a standalone HTML page."""
    markdown = _load_document(path)

    if theme_name is None:
        service = ThemeService(_settings_store(settings))
        selected = service.load_saved()
    else:
        try:
            selected = Theme(theme_name.strip().capitalize())
        except ValueError as exc:
            raise typer.BadParameter(f"Unknown theme: {theme_name}") from exc

    html = build_full_html(MarkdownConverter().to_html(markdown), selected, title=path.stem)
    try:
        target = write_export(html, output)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"Exported to [bold]{target}[/bold]")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
