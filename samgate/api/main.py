"""FastAPI application for the samgate API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from samgate import __version__
from samgate.api.routes import validate_router
from samgate.api.routes.validate import set_settings as set_validate_settings
from samgate.config import Settings, load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = app.state.settings
    logger.info("samgate API started (encoding=%s)", settings.encoding)
    yield
    logger.info("samgate API shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or load_settings()

    app = FastAPI(
        title="samgate",
        description="Syntactic validation of SAM alignment text",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    set_validate_settings(settings)

    app.include_router(validate_router)

    @app.get("/api/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "samgate API",
            "version": __version__,
            "docs_url": "/docs",
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "samgate.api.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=7879,
    )
