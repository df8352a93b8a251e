"""Tests for the content resolver."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docfront.errors import DocumentNotFound
from docfront.index.catalog import DocumentIndex
from docfront.index.resolver import ContentResolver
from docfront.models import DocumentSource


class TestContentResolver:
    """Test ContentResolver."""

    def test_from_path_lists_sorted(self, doc_dir: Path) -> None:
        """Lists every markdown document sorted by path."""
        resolver = ContentResolver.from_path(doc_dir)

        assert resolver.list() == [
            ("guides/setup.md", "guides/setup.md"),
            ("intro.md", "intro.md"),
            ("test.md", "test.md"),
        ]

    def test_get_known(self, doc_dir: Path) -> None:
        """Returns the rendered document for a known path."""
        resolver = ContentResolver.from_path(doc_dir)

        document = resolver.get("test.md")

        assert document.title == "Test"
        assert "<h1>Test</h1>" in document.html

    def test_get_nested(self, doc_dir: Path) -> None:
        """Nested documents are reachable by their relative path."""
        resolver = ContentResolver.from_path(doc_dir)

        assert resolver.get("guides/setup.md").title == "Setup"

    @pytest.mark.parametrize("path", ["notfounddoc", "notes.txt", "../test.md", "TEST.md", ""])
    def test_get_unknown(self, doc_dir: Path, path: str) -> None:
        """Anything but an exact index key is not found."""
        resolver = ContentResolver.from_path(doc_dir)

        with pytest.raises(DocumentNotFound) as excinfo:
            resolver.get(path)
        assert excinfo.value.path == path

    def test_not_found_is_lookup_error(self) -> None:
        """DocumentNotFound can be handled as a LookupError."""
        resolver = ContentResolver(DocumentIndex())

        with pytest.raises(LookupError):
            resolver.get("x.md")

    def test_custom_loader_and_renderer(self) -> None:
        """Uses the injected collaborators."""
        loader = MagicMock(return_value={"a.md": DocumentSource(raw=b"raw", title="A")})
        renderer = MagicMock(return_value="<p>rendered</p>")

        resolver = ContentResolver.from_path(Path("/docs"), loader=loader, renderer=renderer)

        loader.assert_called_once_with(Path("/docs"))
        renderer.assert_called_once_with(b"raw")
        assert resolver.get("a.md").html == "<p>rendered</p>"


class TestReload:
    """Test ContentResolver.reload."""

    def test_reload_swaps_index(self, doc_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A reload picks up new files and replaces the index object."""
        resolver = ContentResolver.from_path(doc_dir)
        snapshot = resolver.index
        (doc_dir / "added.md").write_text("# Added\n")

        with caplog.at_level(logging.INFO):
            new_index = resolver.reload()

        assert resolver.index is new_index
        assert new_index is not snapshot
        assert resolver.get("added.md").title == "Added"
        assert "added.md" not in snapshot
        assert "Reloaded 4 documents" in caplog.text

    def test_reload_without_base_path(self) -> None:
        """Reloading an in-memory resolver is an error."""
        resolver = ContentResolver(DocumentIndex())

        with pytest.raises(ValueError):
            resolver.reload()
