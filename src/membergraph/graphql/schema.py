"""
Main GraphQL schema definition using Strawberry

The schema is assembled once at import time and shared by every request;
it holds no per-request state.
"""

from typing import Any
from uuid import UUID

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..config import settings
from ..logging import get_logger
from ..store import Store
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query
from .scalars import UUIDScalar

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the assembled schema is not a valid GraphQL schema."""


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(scalar_map={UUID: UUIDScalar}),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved lazy type references early, so the server fails fast
    instead of erroring on the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(store: Store) -> GraphQLRouter[dict[str, Any], None]:
    """Create a POST-only GraphQL router bound to ``store``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, request=request)

    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        allow_queries_via_get=False,
        context_getter=get_context,
    )
