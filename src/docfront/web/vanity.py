"""go-import discovery metadata."""

from __future__ import annotations

import html


def meta_tag(source_base: str, source_repo: str) -> str:
    """Return the ``go-import`` meta tag read by source fetching tools."""
    content = html.escape(f"{source_base} git {source_repo}", quote=True)
    return f'<meta name="go-import" content="{content}">'


def discovery_page(source_base: str, source_repo: str) -> str:
    return meta_tag(source_base, source_repo) + "\n"
