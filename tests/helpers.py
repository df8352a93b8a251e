"""Credentials and deployment values shared by the web tests."""

from __future__ import annotations

USERNAME = "reader"
PASSWORD = "s3cret"
AUTH = (USERNAME, PASSWORD)

HTTPS_ADDR = "docs.example.com:443"
SOURCE_BASE = "example.com/project"
SOURCE_REPO = "https://git.example.com/project"
