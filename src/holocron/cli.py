#!/usr/bin/env python3
"""
Main CLI entry point for the Holocron server.
"""

import asyncio
import json
import os
import sys

import click
import uvicorn

from holocron import __version__
from holocron.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="holocron")
def cli() -> None:
    """Holocron CLI - serve and query the character graph."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8080, type=int, help="Port to bind to (default: 8080)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Holocron API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting Holocron API server", host=host, port=port, reload=reload)

    # The app reads these when uvicorn imports it
    if log_level == "debug":
        os.environ["HOLOCRON_DEBUG"] = "true"
    else:
        os.environ.setdefault("HOLOCRON_DEBUG", "false")
    os.environ.setdefault("HOLOCRON_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "holocron.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("query", required=False)
@click.option(
    "--file",
    "query_file",
    type=click.File("r", encoding="utf-8"),
    help="Read the query from a file instead of the argument",
)
@click.option("--variables", default=None, help="Variables as a JSON object")
@click.option("--operation-name", default=None, help="Operation to run from the document")
def query(
    query: str | None,
    query_file,
    variables: str | None,
    operation_name: str | None,
) -> None:
    """Execute a GraphQL QUERY in-process and print the JSON result."""
    from holocron.graphql.schema import execute_query
    from holocron.repositories import create_repositories

    # Keep stdout for the JSON result
    configure_logging(stream=sys.stderr)

    if query_file is not None:
        query = query_file.read()
    if not query:
        raise click.UsageError("Provide a QUERY argument or --file")

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--variables") from e

    result = asyncio.run(
        execute_query(
            query,
            create_repositories(),
            variables=variable_values,
            operation_name=operation_name,
        )
    )

    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    click.echo(json.dumps(payload, indent=2, default=str))

    if result.errors:
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from holocron.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
