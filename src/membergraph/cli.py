#!/usr/bin/env python3
"""
Main CLI entry point for the membergraph server.
"""

import os
import sys

import click
import uvicorn

from membergraph import __version__
from membergraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="membergraph")
def cli() -> None:
    """membergraph CLI - run the GraphQL API server."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--store",
    "store_backend",
    default=None,
    type=click.Choice(["sqlalchemy", "memory"]),
    help="Store backend (default: MEMBERGRAPH_STORE_BACKEND or sqlalchemy)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    store_backend: str | None,
    log_level: str,
) -> None:
    """Start the membergraph API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting membergraph API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app reads its settings at import time, so pass them through the
    # environment for reload and worker subprocesses.
    if log_level == "debug":
        os.environ["MEMBERGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("MEMBERGRAPH_DEBUG", "false")
    os.environ["MEMBERGRAPH_LOG_LEVEL"] = log_level
    if store_backend:
        os.environ["MEMBERGRAPH_STORE_BACKEND"] = store_backend

    try:
        # Reload and multiple workers need an import string; each worker builds its own app
        if reload or workers > 1:
            uvicorn.run(
                "membergraph.api.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from membergraph.api.app import create_app
            from membergraph.store import create_store

            uvicorn.run(
                create_app(create_store(store_backend)),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
