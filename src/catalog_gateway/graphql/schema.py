"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..datasources import TrackAPI
from ..logging import get_logger
from .context import GatewayContext
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails validation at startup."""


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast instead of
    erroring on the first query.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise SchemaValidationError(
            f"GraphQL schema validation failed: {'; '.join(error_messages)}"
        )

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL introspection failed", errors=error_messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router() -> GraphQLRouter[GatewayContext, None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> GatewayContext:
        """Build the per-request context over the application's shared HTTP client."""
        track_api = TrackAPI(settings.upstream_base_url, client=request.app.state.http_client)
        return GatewayContext(track_api=track_api)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.debug else None,
        context_getter=get_context,
    )
