"""Full HTML page rendering for converted documents."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, Template

from mdreader.models import Theme


@lru_cache(maxsize=1)
def _page_template() -> Template:
    env = Environment(loader=PackageLoader("mdreader.render", "templates"), autoescape=True)
    return env.get_template("page.html")


def build_full_html(fragment: str, theme: Theme = Theme.LIGHT, *, title: str = "") -> str:
    """Wrap an HTML fragment into a standalone themed page.

    The page pulls KaTeX, mermaid and highlight.js from a CDN; the fragment
    itself is inserted without escaping.
    """
    is_dark = theme is Theme.DARK
    return _page_template().render(
        title=title,
        fragment=fragment or "",
        theme_class="dark" if is_dark else "light",
        highlight_theme="github-dark" if is_dark else "github",
        mermaid_theme="dark" if is_dark else "default",
    )
