"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mockbuster.api.errors import register_exception_handlers
from mockbuster.api.routes import comments, films, root
from mockbuster.config import Settings
from mockbuster.database import create_engine, create_session_factory, ping
from mockbuster.migrations import run_migrations

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration to use (read from the environment if omitted)

    Returns:
        Configured FastAPI app; the database engine is created on startup
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: connect, migrate, expose the session factory to get_db
        engine = create_engine(settings)
        try:
            await ping(engine)
        except Exception as e:
            logger.error(f"Failed to connect to database {settings.db_host}:{settings.db_port}: {e}")
            await engine.dispose()
            raise
        logger.info(f"Connected to database {settings.db_name} on {settings.db_host}:{settings.db_port}")

        if settings.run_migrations:
            await run_migrations(settings)

        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        yield

        # Shutdown: release pooled connections
        await engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="Mockbuster Movie API",
        description="A RESTful API for the Mockbuster DVD rental business",
        version="1.0",
        docs_url="/swagger",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(root.router)
    app.include_router(films.router, prefix="/api/v1", tags=["films"])
    app.include_router(comments.router, prefix="/api/v1", tags=["comments"])

    return app


def run() -> None:
    """Console entry point: configure logging and serve the API with uvicorn."""
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(f"Starting Mockbuster Movie API server on port {settings.port}")
    logger.info(f"API documentation available at http://localhost:{settings.port}/swagger")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
