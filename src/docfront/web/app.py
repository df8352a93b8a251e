"""FastAPI application serving the documentation frontend."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from docfront import __version__
from docfront.config import AppConfig
from docfront.index.resolver import ContentResolver
from docfront.web.auth import AllowAll, Authorizer, StaticCredentials
from docfront.web.compression import CompressionMiddleware
from docfront.web.frontend import router as frontend_router
from docfront.web.security import SecurityMiddleware

LOGGER = logging.getLogger(__name__)


def _default_authorizer(config: AppConfig) -> Authorizer:
    if config.auth_enabled:
        return StaticCredentials(config.username or "", config.password or "")
    LOGGER.warning("No credentials configured; documentation is served without authentication")
    return AllowAll()


def create_app(
    config: AppConfig,
    resolver: ContentResolver | None = None,
    authorizer: Authorizer | None = None,
) -> FastAPI:
    """Build the application for ``config``.

    Requests pass through SecurityMiddleware, then CompressionMiddleware,
    then the router.
    """
    if resolver is None:
        resolver = ContentResolver.from_path(config.doc_path)
    if authorizer is None:
        authorizer = _default_authorizer(config)

    app = FastAPI(
        title="docfront",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.resolver = resolver
    app.state.authorizer = authorizer

    # Starlette wraps in reverse order: the last middleware added runs first.
    app.add_middleware(CompressionMiddleware)
    app.add_middleware(SecurityMiddleware, policy=config.security)
    app.include_router(frontend_router)
    return app
