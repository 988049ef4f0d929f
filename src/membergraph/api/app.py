"""
Main FastAPI application for the membergraph service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import dispose_database, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import SqlAlchemyStore, Store, create_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(store: Store | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store handed to the GraphQL resolvers. Defaults to the backend
            selected by ``settings.store_backend``.
    """
    store = store if store is not None else create_store()
    uses_database = isinstance(store, SqlAlchemyStore)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting membergraph API...", store=type(store).__name__)
        if uses_database:
            init_database()

        yield

        logger.info("Shutting down membergraph API...")
        if uses_database:
            await dispose_database()

    app = FastAPI(
        title="membergraph API",
        description="GraphQL CRUD over users, profiles, posts and member types",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["POST"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(store), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "membergraph.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
