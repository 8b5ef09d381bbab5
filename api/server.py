"""FastAPI server for the contacts dashboard.

Main entry point for the API server.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from api.routes import (
    health,
    contacts,
)
from core import __version__
from core.observability.logging import configure_logging, get_logger
from core.settings import Settings, load_settings

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; read from the environment at startup when None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        app_settings = settings or load_settings()
        configure_logging(
            level=app_settings.log_level_value,
            json_format=app_settings.log_json,
            force=True,
        )
        app.state.settings = app_settings

        if not app_settings.holded_api_key:
            logger.warning("HOLDED_API_KEY is not set; contact fetches will fail")
        logger.info("Contacts dashboard starting up...")

        yield

        logger.info("Contacts dashboard shutting down...")

    app = FastAPI(
        title="Contacts Dashboard",
        description="Contact list from the Holded accounting API, rendered as a table with colored type chips",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.include_router(health.router, tags=["Health"])
    app.include_router(contacts.router, tags=["Contacts"])

    return app


# Default app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=True)
