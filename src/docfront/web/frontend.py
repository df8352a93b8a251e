"""Request dispatch for the documentation frontend."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from docfront.config import AppConfig
from docfront.errors import DocumentNotFound
from docfront.index.resolver import ContentResolver
from docfront.web.auth import Authorizer, require_authorization
from docfront.web.pages import render_document, render_listing
from docfront.web.routing import RouteKind, classify
from docfront.web.vanity import discovery_page

LOGGER = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("/{path:path}", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def dispatch(request: Request, path: str) -> HTMLResponse:
    route = classify(request.url.path, request.query_params)
    if route.kind in (RouteKind.FAVICON, RouteKind.NOT_FOUND):
        raise HTTPException(status_code=404, detail="Not Found")

    authorizer: Authorizer = request.app.state.authorizer
    await require_authorization(request, authorizer)

    config: AppConfig = request.app.state.config
    resolver: ContentResolver = request.app.state.resolver

    if route.kind is RouteKind.DISCOVERY:
        return HTMLResponse(content=discovery_page(config.source_base, config.source_repo))

    if route.kind is RouteKind.LISTING:
        return HTMLResponse(content=render_listing(resolver.list()))

    try:
        document = resolver.get(route.name)
    except DocumentNotFound:
        LOGGER.info("Unknown document requested: %s", route.name)
        raise HTTPException(status_code=404, detail="Not Found")
    return HTMLResponse(content=render_document(document))
