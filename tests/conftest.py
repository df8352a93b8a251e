"""Shared fixtures for docfront tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docfront.config import AppConfig, SecurityPolicy
from docfront.web.app import create_app

from tests.helpers import HTTPS_ADDR, PASSWORD, SOURCE_BASE, SOURCE_REPO, USERNAME


@pytest.fixture
def doc_dir(tmp_path: Path) -> Path:
    """A small documentation tree with one nested page and one non-markdown file."""
    docs = tmp_path / "doc"
    docs.mkdir()
    (docs / "test.md").write_text("# Test\n\nThis is a test document.\n", encoding="utf-8")
    (docs / "intro.md").write_text("# Introduction\n\nWelcome to the docs.\n", encoding="utf-8")
    guides = docs / "guides"
    guides.mkdir()
    (guides / "setup.md").write_text("# Setup\n\n* install\n* configure\n", encoding="utf-8")
    (docs / "notes.txt").write_text("not a document", encoding="utf-8")
    return docs


@pytest.fixture
def config(doc_dir: Path) -> AppConfig:
    return AppConfig(
        doc_path=doc_dir,
        security=SecurityPolicy(https_addr=HTTPS_ADDR),
        source_base=SOURCE_BASE,
        source_repo=SOURCE_REPO,
        username=USERNAME,
        password=PASSWORD,
    )


@pytest.fixture
def web_app(config: AppConfig) -> FastAPI:
    return create_app(config)


@pytest.fixture
def https_client(web_app: FastAPI) -> TestClient:
    """Client whose requests arrive over TLS."""
    return TestClient(web_app, base_url="https://testserver")


@pytest.fixture
def http_client(web_app: FastAPI) -> TestClient:
    """Client whose requests arrive over plain HTTP; redirects are not followed."""
    return TestClient(web_app, base_url="http://testserver", follow_redirects=False)
