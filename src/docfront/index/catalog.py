"""In-memory index of rendered documents."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from docfront.models import Document, DocumentSource
from docfront.render import render_markdown

Renderer = Callable[[bytes], str]


class DocumentIndex:
    """Read-only mapping from relative path to :class:`Document`.

    The index is never mutated after construction, so it can be shared by
    concurrent requests without locking.
    """

    def __init__(self, documents: Mapping[str, Document] | None = None) -> None:
        self._documents = MappingProxyType(dict(documents or {}))

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def get(self, path: str) -> Document | None:
        return self._documents.get(path)

    def paths(self) -> list[str]:
        return sorted(self._documents)

    def documents(self) -> list[Document]:
        """All documents in lexicographic path order."""
        return [self._documents[path] for path in self.paths()]


def build_index(
    sources: Mapping[str, DocumentSource], renderer: Renderer = render_markdown
) -> DocumentIndex:
    """Render every source eagerly and wrap the result in an index."""
    documents = {
        path: Document(path=path, source=source.raw, title=source.title, html=renderer(source.raw))
        for path, source in sources.items()
    }
    return DocumentIndex(documents)
