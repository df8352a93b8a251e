"""Request classification for the frontend router."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

DOC_PREFIX = "/doc/"
FAVICON_PATH = "/favicon.ico"
DISCOVERY_PARAM = "go-get"


class RouteKind(Enum):
    LISTING = "listing"
    DOCUMENT = "document"
    FAVICON = "favicon"
    DISCOVERY = "discovery"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Route:
    kind: RouteKind
    name: str = ""


def classify(path: str, query: Mapping[str, str] | None = None) -> Route:
    """Resolve a request path and query to exactly one route.

    The discovery query parameter takes precedence over the path.
    """
    if query is not None and query.get(DISCOVERY_PARAM) == "1":
        return Route(RouteKind.DISCOVERY)
    if path in ("", "/"):
        return Route(RouteKind.LISTING)
    if path == FAVICON_PATH:
        return Route(RouteKind.FAVICON)
    if path.startswith(DOC_PREFIX):
        name = path[len(DOC_PREFIX):]
        if name:
            return Route(RouteKind.DOCUMENT, name)
    return Route(RouteKind.NOT_FOUND)
