"""FastAPI application factory for the wallpaper service."""

from __future__ import annotations

import inspect
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api import router
from .config import Settings, get_settings
from .errors import WallpaperError
from .models import ErrorResponse
from .upstream import BingArchiveClient

logger = logging.getLogger(__name__)


def build_archive_client(settings: Settings) -> BingArchiveClient:
    """Build the shared upstream client from settings."""
    return BingArchiveClient(
        host=settings.upstream_host,
        timeout=settings.upstream_timeout_seconds,
    )


async def wallpaper_error_handler(request: Request, exc: WallpaperError) -> JSONResponse:
    """Render any request failure as a 500 with an ``error`` message."""
    logger.error(
        "Wallpaper request failed",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    logging.basicConfig(level=logging.INFO)
    app = FastAPI(
        title="Wallpaper Service",
        description="Proxy for the Bing daily wallpaper archive.",
        version="0.1.0",
        # The wallpaper route claims every path; keep the generated docs off it.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(router)
    app.add_exception_handler(WallpaperError, wallpaper_error_handler)
    app.state.archive_client = None

    async def _resolve_settings() -> Settings:
        override = app.dependency_overrides.get(get_settings)
        if override is None:
            return get_settings()

        candidate = override()
        if inspect.isawaitable(candidate):
            return await candidate
        return candidate

    @app.on_event("startup")
    async def start_services() -> None:
        """Open the shared upstream HTTP client."""
        settings = await _resolve_settings()
        app.state.archive_client = build_archive_client(settings)
        logger.info(
            "Archive client ready",
            extra={
                "upstream_host": settings.upstream_host,
                "require_path_prefix": settings.require_path_prefix,
                "cache_max_age_seconds": settings.cache_max_age_seconds,
            },
        )

    @app.on_event("shutdown")
    async def shutdown_services() -> None:
        """Close the upstream HTTP client."""
        archive_client = getattr(app.state, "archive_client", None)
        if archive_client:
            await archive_client.aclose()
            app.state.archive_client = None
            logger.info("Archive client closed")

    return app


app = create_app()
