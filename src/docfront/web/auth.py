"""HTTP Basic authorization gate for content routes."""

from __future__ import annotations

import logging
import secrets
from typing import Optional, Protocol

from fastapi import HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

LOGGER = logging.getLogger(__name__)

REALM = "docfront"

_basic = HTTPBasic(realm=REALM, auto_error=False)


class Authorizer(Protocol):
    def authorized(self, credentials: Optional[HTTPBasicCredentials]) -> bool: ...


class AllowAll:
    """Authorizer used when no credentials are configured."""

    def authorized(self, credentials: Optional[HTTPBasicCredentials]) -> bool:
        return True


class StaticCredentials:
    """Accepts exactly one username/password pair."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username.encode("utf-8")
        self._password = password.encode("utf-8")

    def authorized(self, credentials: Optional[HTTPBasicCredentials]) -> bool:
        if credentials is None:
            return False
        # Both comparisons always run.
        user_ok = secrets.compare_digest(credentials.username.encode("utf-8"), self._username)
        pass_ok = secrets.compare_digest(credentials.password.encode("utf-8"), self._password)
        return user_ok and pass_ok


def unauthorized() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail="Unauthorized",
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


async def require_authorization(request: Request, authorizer: Authorizer) -> None:
    """Raise a 401 unless ``authorizer`` accepts the request's Basic credentials."""
    try:
        credentials = await _basic(request)
    except HTTPException:
        credentials = None
    if not authorizer.authorized(credentials):
        LOGGER.warning("Unauthorized request for %s", request.url.path)
        raise unauthorized()
