"""Exceptions raised by the documentation frontend."""

from __future__ import annotations

__all__ = [
    "DocfrontError",
    "DocumentNotFound",
]


class DocfrontError(RuntimeError):
    """Base exception for docfront failures."""


class DocumentNotFound(DocfrontError, LookupError):
    """Raised when a requested document path is not in the index."""

    def __init__(self, path: str) -> None:
        super().__init__(f"document not found: {path}")
        self.path = path
