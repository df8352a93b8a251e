"""Transport security middleware: HTTPS redirection and HSTS."""

from __future__ import annotations

import logging
from urllib.parse import quote

from starlette.datastructures import MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from docfront.config import SecurityPolicy

LOGGER = logging.getLogger(__name__)

SECURE_SCHEMES = ("https", "wss")

# Existing percent escapes and RFC 3986 delimiters pass through untouched.
PATH_SAFE = "/%:@!$&'()*+,;=-._~"
QUERY_SAFE = PATH_SAFE + "?"


class SecurityMiddleware:
    """Redirect plain requests to HTTPS and stamp HSTS on TLS responses.

    The redirect runs before anything downstream, so unauthenticated plain
    requests are redirected rather than rejected.
    """

    def __init__(self, app: ASGIApp, policy: SecurityPolicy) -> None:
        self.app = app
        self.policy = policy

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if scope.get("scheme", "http") not in SECURE_SCHEMES:
            location = self.policy.redirect_location(_request_path(scope), _request_query(scope))
            LOGGER.debug("Redirecting %s to %s", scope.get("path"), location)
            response = Response(status_code=307, headers={"location": location})
            await response(scope, receive, send)
            return

        hsts = self.policy.hsts_header()

        async def send_with_hsts(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers["Strict-Transport-Security"] = hsts
            await send(message)

        await self.app(scope, receive, send_with_hsts)


def _request_path(scope: Scope) -> str:
    """The request path as ASCII, percent-encoding any raw non-ASCII bytes."""
    raw_path = scope.get("raw_path")
    if raw_path:
        return quote(raw_path.split(b"?", 1)[0], safe=PATH_SAFE)
    return quote(scope.get("path", "/"), safe=PATH_SAFE)


def _request_query(scope: Scope) -> str:
    return quote(scope.get("query_string", b""), safe=QUERY_SAFE)
