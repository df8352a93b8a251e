"""Command line interface for docfront."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from docfront.config import DEFAULT_HSTS_MAX_AGE, AppConfig, SecurityPolicy, split_addr
from docfront.index.resolver import ContentResolver
from docfront.web.app import create_app

console = Console()
app = typer.Typer(help="docfront - HTTPS documentation frontend")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _server_configs(
    web_app: object,
    config: AppConfig,
    cert: Optional[Path],
    key: Optional[Path],
) -> List[uvicorn.Config]:
    """One plain listener, plus an HTTPS listener when a certificate is given.

    Without a certificate TLS is expected to terminate upstream, so the
    forwarded scheme is trusted.
    """
    http_host, http_port = split_addr(config.http_addr, 80)
    if cert is None or key is None:
        return [
            uvicorn.Config(
                web_app,
                host=http_host,
                port=http_port,
                proxy_headers=True,
                log_level="info",
            )
        ]

    https_host, https_port = split_addr(config.security.https_addr, 443)
    return [
        uvicorn.Config(
            web_app,
            host=https_host,
            port=https_port,
            ssl_certfile=str(cert),
            ssl_keyfile=str(key),
            proxy_headers=False,
            log_level="info",
        ),
        uvicorn.Config(
            web_app, host=http_host, port=http_port, proxy_headers=False, log_level="info"
        ),
    ]


async def _serve_all(configs: List[uvicorn.Config]) -> None:
    await asyncio.gather(*(uvicorn.Server(cfg).serve() for cfg in configs))


@app.command()
def serve(
    docs: Path = typer.Option(Path("doc"), "--docs", help="Directory of markdown documents"),
    https_addr: str = typer.Option("localhost:443", help="HTTPS host:port, also the redirect target"),
    http_addr: str = typer.Option(":80", help="Plain HTTP listen address"),
    cert: Optional[Path] = typer.Option(None, help="TLS certificate file"),
    key: Optional[Path] = typer.Option(None, help="TLS private key file"),
    username: Optional[str] = typer.Option(None, envvar="DOCFRONT_USERNAME", help="Basic auth user"),
    password: Optional[str] = typer.Option(None, envvar="DOCFRONT_PASSWORD", help="Basic auth password"),
    source_base: str = typer.Option(AppConfig().source_base, help="go-import path prefix"),
    source_repo: str = typer.Option(AppConfig().source_repo, help="go-import repository URL"),
    hsts_max_age: int = typer.Option(DEFAULT_HSTS_MAX_AGE, help="Strict-Transport-Security max-age"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Serve the documentation."""
    _setup_logging(verbose)
    if (cert is None) != (key is None):
        raise typer.BadParameter("--cert and --key must be given together")

    config = AppConfig(
        doc_path=docs,
        http_addr=http_addr,
        security=SecurityPolicy(https_addr=https_addr, hsts_max_age=hsts_max_age),
        source_base=source_base,
        source_repo=source_repo,
        username=username,
        password=password,
    )
    resolved_docs = config.resolve_doc_path(Path.cwd())
    if not resolved_docs.is_dir():
        console.print(f"[yellow]Warning: documentation directory {resolved_docs} not found.[/yellow]")

    resolver = ContentResolver.from_path(resolved_docs)
    web_app = create_app(config, resolver=resolver)

    console.print(
        f"Serving {len(resolver.index)} documents from [bold]{resolved_docs}[/bold] "
        f"(https://{config.security.https_addr})"
    )
    asyncio.run(_serve_all(_server_configs(web_app, config, cert, key)))


@app.command()
def docs(
    path: Path = typer.Argument(Path("doc"), help="Directory of markdown documents"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the documents that would be served."""
    _setup_logging(verbose)
    resolver = ContentResolver.from_path(path)
    documents = resolver.index.documents()
    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Path")
    table.add_column("Title")
    table.add_column("Size")
    for document in documents:
        table.add_row(document.path, document.title, str(document.size))
    console.print(table)
