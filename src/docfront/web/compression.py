"""Response compression negotiated from ``Accept-Encoding``.

Responses are buffered, compressed as a whole and sent with the encoded
length. A client that sends no usable ``Accept-Encoding`` gets the handler
output byte for byte.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import Iterable, Optional, Set

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

LOGGER = logging.getLogger(__name__)

SUPPORTED_ENCODINGS = ("gzip", "deflate")

COMPRESSIBLE_TYPES: Set[str] = {
    "text/html",
    "text/css",
    "text/plain",
    "text/xml",
    "text/javascript",
    "text/markdown",
    "application/json",
    "application/javascript",
    "application/xml",
    "application/xhtml+xml",
    "image/svg+xml",
}


def _parse_accept_encoding(header: str) -> dict[str, float]:
    weights: dict[str, float] = {}
    for item in header.split(","):
        token, _, params = item.strip().partition(";")
        token = token.strip().lower()
        if not token:
            continue
        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        weights[token] = quality
    return weights


def negotiate_encoding(
    header: Optional[str], supported: Iterable[str] = SUPPORTED_ENCODINGS
) -> Optional[str]:
    """Pick the best supported encoding, or ``None`` for an uncompressed body."""
    if not header:
        return None
    weights = _parse_accept_encoding(header)
    wildcard = weights.get("*", 0.0)
    best: Optional[str] = None
    best_quality = 0.0
    for encoding in supported:
        quality = weights.get(encoding, wildcard)
        if quality > best_quality:
            best, best_quality = encoding, quality
    return best


def compress(body: bytes, encoding: str, level: int = 6) -> bytes:
    if encoding == "gzip":
        return gzip.compress(body, compresslevel=level, mtime=0)
    if encoding == "deflate":
        return zlib.compress(body, level)
    raise ValueError(f"unsupported content encoding: {encoding}")


def decompress(body: bytes, encoding: str) -> bytes:
    if encoding == "gzip":
        return gzip.decompress(body)
    if encoding == "deflate":
        return zlib.decompress(body)
    raise ValueError(f"unsupported content encoding: {encoding}")


class CompressionMiddleware:
    """Compress text responses for clients that ask for it."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        minimum_size: int = 0,
        level: int = 6,
        compressible_types: Optional[Set[str]] = None,
    ) -> None:
        self.app = app
        self.minimum_size = minimum_size
        self.level = level
        self.compressible_types = compressible_types or COMPRESSIBLE_TYPES

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        encoding = negotiate_encoding(Headers(scope=scope).get("accept-encoding"))
        if encoding is None:
            await self.app(scope, receive, send)
            return

        start: Optional[Message] = None
        chunks: list[bytes] = []

        async def buffered_send(message: Message) -> None:
            nonlocal start
            if message["type"] == "http.response.start":
                start = message
                return
            if message["type"] != "http.response.body" or start is None:
                await send(message)
                return
            chunks.append(message.get("body", b""))
            if message.get("more_body", False):
                return
            await self._send_response(start, b"".join(chunks), encoding, send)

        await self.app(scope, receive, buffered_send)

    async def _send_response(
        self, start: Message, body: bytes, encoding: str, send: Send
    ) -> None:
        headers = MutableHeaders(scope=start)
        if self._should_compress(headers, body):
            body = compress(body, encoding, self.level)
            headers["Content-Encoding"] = encoding
            headers["Content-Length"] = str(len(body))
            headers.add_vary_header("Accept-Encoding")
        await send(start)
        await send({"type": "http.response.body", "body": body, "more_body": False})

    def _should_compress(self, headers: Headers, body: bytes) -> bool:
        if "content-encoding" in headers:
            return False
        if not body or len(body) < self.minimum_size:
            return False
        base_type = headers.get("content-type", "").split(";")[0].strip().lower()
        return base_type in self.compressible_types
