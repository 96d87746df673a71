"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from loreexplorer.api.v1.router import router as api_router
from loreexplorer.api.web.views import router as web_router
from loreexplorer.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Lore Explorer application...")
    logger.info(f"Environment: {settings.environment}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set. Story generation will fail.")
    if not settings.store_configured:
        logger.warning("DATABASE_URL is not set. Saved locations are disabled.")

    yield

    # Shutdown: close the shared OpenAI client if one was created
    from loreexplorer.api.dependencies import get_generation_service

    if get_generation_service.cache_info().currsize:
        await get_generation_service().close()
        get_generation_service.cache_clear()
    logger.info("Shutting down Lore Explorer application...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="Lore Explorer",
        description="AI-generated stories and summaries for the places around you",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    # Include routers
    app.include_router(api_router)
    app.include_router(web_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with location store connectivity test."""
        from loreexplorer.infrastructure.database import get_session_factory

        session_factory = get_session_factory()
        if session_factory is None:
            return JSONResponse({"status": "healthy", "store": "unconfigured"})

        try:
            async with session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse({"status": "healthy", "store": "connected"})
        except Exception:
            return JSONResponse(
                {"status": "unhealthy", "store": "disconnected"},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
