"""FastAPI application entry point for the reference remote store."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reel_scheduler import __version__
from reel_scheduler.api.repository import DataFileRepository
from reel_scheduler.api.routes import health, videos
from reel_scheduler.config import settings
from reel_scheduler.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("application_starting", version=__version__)
    try:
        app.state.repository.initialize()
    except OSError as e:
        logger.error("data_file_init_failed", error=str(e))
        raise

    yield

    logger.info("application_shutting_down")


def create_app(data_file: Path | None = None) -> FastAPI:
    """Build the app around a data file (defaults to settings.data_file)."""
    app = FastAPI(
        title="Reel Scheduler",
        description="Remote store for tracked short-form videos",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.repository = DataFileRepository(data_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api")
    app.include_router(videos.router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        return {
            "name": "Reel Scheduler",
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "reel_scheduler.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
