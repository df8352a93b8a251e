"""Path to document resolution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Mapping, Tuple

from docfront.errors import DocumentNotFound
from docfront.index.catalog import DocumentIndex, Renderer, build_index
from docfront.ingestion.doc_loader import load_all
from docfront.models import Document, DocumentSource
from docfront.render import render_markdown

LOGGER = logging.getLogger(__name__)

SourceLoader = Callable[[Path], Mapping[str, DocumentSource]]


class ContentResolver:
    """Maps request paths onto the current document index."""

    def __init__(
        self,
        index: DocumentIndex,
        *,
        base_path: Path | None = None,
        loader: SourceLoader = load_all,
        renderer: Renderer = render_markdown,
    ) -> None:
        self._index = index
        self.base_path = base_path
        self.loader = loader
        self.renderer = renderer

    @classmethod
    def from_path(
        cls,
        base_path: Path,
        *,
        loader: SourceLoader = load_all,
        renderer: Renderer = render_markdown,
    ) -> "ContentResolver":
        index = build_index(loader(base_path), renderer)
        return cls(index, base_path=base_path, loader=loader, renderer=renderer)

    @property
    def index(self) -> DocumentIndex:
        return self._index

    def list(self) -> List[Tuple[str, str]]:
        """Return ``(path, display name)`` pairs sorted by path."""
        return [(doc.path, doc.display_name) for doc in self._index.documents()]

    def get(self, path: str) -> Document:
        document = self._index.get(path)
        if document is None:
            raise DocumentNotFound(path)
        return document

    def reload(self) -> DocumentIndex:
        """Rebuild the index from disk and swap it in as a whole."""
        if self.base_path is None:
            raise ValueError("ContentResolver has no base_path to reload from")
        index = build_index(self.loader(self.base_path), self.renderer)
        self._index = index
        LOGGER.info("Reloaded %d documents from %s", len(index), self.base_path)
        return index
