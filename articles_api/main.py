"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from articles_api.config import Settings, get_settings
from articles_api.infrastructure.database import Database
from articles_api.infrastructure.logging.log_config import setup_logging
from articles_api.infrastructure.memory.article_repository import InMemoryArticleRepository
from articles_api.presentation.api.errors import register_exception_handlers
from articles_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the configured store once, close it on shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    database: Database | None = None
    if settings.repository_backend == "memory":
        app.state.article_repository = InMemoryArticleRepository()
        logger.info("Using in-memory article repository")
    else:
        database = Database(settings)
        app.state.database = database
        if settings.database_url:
            logger.info("Opening database %s", database.engine.url.render_as_string(hide_password=True))
        else:
            logger.info("Opening database %s", settings.postgres_dsn(hide_password=True))
        await database.create_tables()

    try:
        yield
    finally:
        if database is not None:
            await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app with uvicorn on APP_HOST:APP_PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "articles_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "development",
    )


if __name__ == "__main__":
    run()
