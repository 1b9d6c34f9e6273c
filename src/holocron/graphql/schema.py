"""
Main GraphQL schema definition using Strawberry
"""

from collections.abc import AsyncIterator
from typing import Any

import strawberry
from fastapi import Depends, Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, ExecutionResult

from ..cancellation import CancellationToken
from ..config import settings
from ..errors import HolocronError
from ..logging import get_logger
from ..repositories import Repositories
from .context import build_context
from .queries.root import Query
from .types import Droid, Human

logger = get_logger(__name__)


class HolocronSchema(strawberry.Schema):
    """Schema that logs each field error through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        _ = execution_context
        for error in errors:
            original = error.original_error
            if original is None or isinstance(original, HolocronError):
                logger.warning(
                    "GraphQL error",
                    error=error.message,
                    path=error.path,
                    code=error.extensions.get("code") if error.extensions else None,
                )
            else:
                logger.error(
                    "Unexpected error while resolving field",
                    error=error.message,
                    path=error.path,
                    exc_info=original,
                )


# Droid and Human are listed so interface dispatch works for every variant
schema = HolocronSchema(query=Query, types=[Droid, Human])


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def execute_query(
    query: str,
    repositories: Repositories,
    *,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    cancellation: CancellationToken | None = None,
) -> ExecutionResult:
    """Execute one query in-process.

    The request's cancellation token is always fired when execution ends so
    fetches still in flight are released. If it fires before completion,
    ``asyncio.CancelledError`` is raised and no result is returned.
    """
    cancellation = cancellation or CancellationToken()
    context = build_context(repositories, cancellation)
    try:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=context,
            operation_name=operation_name,
        )
    finally:
        cancellation.cancel()


async def request_cancellation() -> AsyncIterator[CancellationToken]:
    """Provide a cancellation token scoped to one HTTP request."""
    cancellation = CancellationToken()
    try:
        yield cancellation
    finally:
        cancellation.cancel()


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(
        request: Request,
        cancellation: CancellationToken = Depends(request_cancellation),
    ) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(request.app.state.repositories, cancellation, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.debug else None,
        context_getter=get_context,
    )
