"""Loading of markdown sources from the documentation directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from docfront.models import DocumentSource
from docfront.render import decode_source, extract_title
from docfront.utils.files import iter_doc_paths, relative_key

LOGGER = logging.getLogger(__name__)


def load_source(path: Path) -> DocumentSource:
    """Read a single markdown file and derive its title."""
    raw = path.read_bytes()
    return DocumentSource(raw=raw, title=extract_title(decode_source(raw), path.stem))


def load_all(base_path: Path) -> Dict[str, DocumentSource]:
    """Load every markdown file below ``base_path`` keyed by relative path."""
    base_path = Path(base_path)
    if not base_path.is_dir():
        LOGGER.warning("Documentation directory %s does not exist", base_path)
        return {}

    sources: Dict[str, DocumentSource] = {}
    for path in iter_doc_paths([base_path]):
        try:
            sources[relative_key(path, base_path)] = load_source(path)
        except OSError as exc:
            LOGGER.error("Failed to read %s: %s", path, exc)
    LOGGER.info("Loaded %d documents from %s", len(sources), base_path)
    return sources
