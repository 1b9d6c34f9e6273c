"""
Main FastAPI application for the Holocron service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..repositories import Repositories, create_repositories

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(repositories: Repositories | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repositories: Repositories to serve; built from settings on startup when None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Holocron API...")
        if getattr(app.state, "repositories", None) is None:
            app.state.repositories = create_repositories()
        yield
        logger.info("Shutting down Holocron API...")

    app = FastAPI(
        title="Holocron API",
        description="GraphQL object graph over droids and humans",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.repositories = repositories

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

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast: the server should not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "holocron.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
