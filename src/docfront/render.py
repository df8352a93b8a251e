"""Markdown rendering for documentation pages.

Rendering never raises: if Python-Markdown chokes on a document, the page
falls back to the escaped source inside ``<pre>``.
"""

from __future__ import annotations

import html
import logging

import markdown

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS: list[str] = ["fenced_code", "tables"]


def decode_source(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def extract_title(text: str, default: str) -> str:
    """Return the text of the first level-one heading, or ``default``."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:].strip() or default
    return default


def render_markdown(raw: bytes) -> str:
    text = decode_source(raw)
    try:
        return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
    except Exception as exc:
        LOGGER.warning("Markdown rendering failed, serving escaped source: %s", exc)
        return render_plain(text)


def render_plain(text: str) -> str:
    return f"<pre>{html.escape(text)}</pre>"
