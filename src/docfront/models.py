"""Core docfront data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentSource:
    """Raw markup as loaded from disk, before rendering."""

    raw: bytes
    title: str


@dataclass(frozen=True, slots=True)
class Document:
    """A rendered documentation page, keyed by its relative path."""

    path: str
    source: bytes
    title: str
    html: str

    @property
    def display_name(self) -> str:
        return self.path

    @property
    def size(self) -> int:
        return len(self.source)
