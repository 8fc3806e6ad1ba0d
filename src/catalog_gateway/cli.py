#!/usr/bin/env python3
"""
Main CLI entry point for the catalog gateway.
"""

import os
import sys

import click
import uvicorn

from catalog_gateway import __version__
from catalog_gateway.config import settings
from catalog_gateway.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="catalog-gateway")
def cli() -> None:
    """Catalog gateway CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    show_default=True,
    type=int,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
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
    log_level: str,
) -> None:
    """Start the GraphQL gateway server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting catalog gateway server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
        upstream_base_url=settings.upstream_base_url,
    )

    # Worker and reload processes re-import the app, so settings travel via the environment
    if log_level == "debug":
        os.environ["CATALOG_GATEWAY_DEBUG"] = "true"
        os.environ["CATALOG_GATEWAY_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CATALOG_GATEWAY_DEBUG", "false")
        os.environ.setdefault("CATALOG_GATEWAY_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "catalog_gateway.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from catalog_gateway.api.app import app

            uvicorn.run(
                app,
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


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from catalog_gateway.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
