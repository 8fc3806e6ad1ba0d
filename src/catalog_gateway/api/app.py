"""
Main FastAPI application for the catalog gateway
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..datasources import create_http_client
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting catalog gateway...",
        upstream_base_url=settings.upstream_base_url,
        environment=settings.environment,
    )

    if app.state.owns_http_client:
        app.state.http_client = create_http_client(timeout=settings.upstream_timeout)
    logger.info("Upstream HTTP client initialized", timeout=settings.upstream_timeout)

    yield

    logger.info("Shutting down catalog gateway...")
    # An injected client belongs to the caller
    if app.state.owns_http_client:
        await app.state.http_client.aclose()
        app.state.http_client = None


def create_app(http_client: httpx.AsyncClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        http_client: HTTP client used for upstream calls. One is created at
            startup from settings when omitted.
    """
    app = FastAPI(
        title="Catalog Gateway",
        description="GraphQL gateway over the Catstronauts track catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.http_client = http_client
    app.state.owns_http_client = http_client is None

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_gateway.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
