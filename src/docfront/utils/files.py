"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

DOC_SUFFIXES = (".md",)


def iter_doc_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield markdown paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            yield from iter_doc_paths(
                sorted(child for child in item.rglob("*") if child.is_file())
            )
        elif item.is_file() and item.suffix.lower() in DOC_SUFFIXES:
            yield item


def relative_key(path: Path, base: Path) -> str:
    """Return the slash-separated path of ``path`` below ``base``."""
    return path.relative_to(base).as_posix()
