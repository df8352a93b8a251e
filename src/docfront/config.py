"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_HSTS_MAX_AGE = 86400
DEFAULT_SOURCE_BASE = "upspin.io"
DEFAULT_SOURCE_REPO = "https://upspin.googlesource.com/upspin"


@dataclass(frozen=True, slots=True)
class SecurityPolicy:
    """Transport security settings shared by every request."""

    https_addr: str = "localhost:443"
    hsts_max_age: int = DEFAULT_HSTS_MAX_AGE
    include_subdomains: bool = True

    def hsts_header(self) -> str:
        value = f"max-age={self.hsts_max_age}"
        if self.include_subdomains:
            value += "; includeSubDomains"
        return value

    def redirect_location(self, path: str, query: str = "") -> str:
        """Build the HTTPS URL for a plain-HTTP request.

        The host always comes from ``https_addr``, never from the request.
        """
        location = f"https://{self.https_addr}{path or '/'}"
        if query:
            location += f"?{query}"
        return location


@dataclass(frozen=True, slots=True)
class AppConfig:
    doc_path: Path = Path("doc")
    http_addr: str = ":80"
    security: SecurityPolicy = field(default_factory=SecurityPolicy)
    source_base: str = DEFAULT_SOURCE_BASE
    source_repo: str = DEFAULT_SOURCE_REPO
    username: str | None = None
    password: str | None = None

    @property
    def auth_enabled(self) -> bool:
        return bool(self.username) and self.password is not None

    def resolve_doc_path(self, base_dir: Path | None = None) -> Path:
        if Path(self.doc_path).is_absolute() or base_dir is None:
            return Path(self.doc_path)
        return base_dir / self.doc_path


def split_addr(addr: str, default_port: int) -> tuple[str, int]:
    """Split a ``host:port`` listen address; an empty host means all interfaces."""
    host, sep, port = addr.rpartition(":")
    if not sep:
        return addr or "0.0.0.0", default_port
    return host or "0.0.0.0", int(port) if port else default_port
