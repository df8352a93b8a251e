"""HTML page assembly for the documentation listing and pages."""

from __future__ import annotations

import html
from functools import lru_cache
from importlib.resources import files
from string import Template
from typing import Iterable, Tuple
from urllib.parse import quote

from docfront.models import Document


@lru_cache(maxsize=None)
def _load_template(name: str) -> Template:
    template = files("docfront.web").joinpath("templates", name)
    return Template(template.read_text(encoding="utf-8"))


def doc_link(path: str, name: str) -> str:
    href = html.escape("/doc/" + quote(path, safe="/"), quote=True)
    return f'<a href="{href}">{html.escape(name)}</a>'


def render_listing(entries: Iterable[Tuple[str, str]]) -> str:
    """Render the index page with one link per ``(path, name)`` entry."""
    items = "\n".join(f"    <li>{doc_link(path, name)}</li>" for path, name in entries)
    return _load_template("list.html").substitute(entries=items)


def render_document(document: Document) -> str:
    return _load_template("doc.html").substitute(
        title=html.escape(document.title), content=document.html
    )
