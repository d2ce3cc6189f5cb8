"""HTTP route definitions for the wallpaper service."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import PlainTextResponse, StreamingResponse

from .config import Settings, get_settings
from .constants import IMAGE_MEDIA_TYPE, IMAGE_REQUEST_TYPE
from .errors import UnhandledFailure, WallpaperError
from .models import ErrorResponse, WallpaperInfo
from .resolver import WallpaperResolver
from .upstream import BingArchiveClient

logger = logging.getLogger(__name__)
router = APIRouter()

WALLPAPER_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "wallpaper"}


def get_archive_client(request: Request) -> BingArchiveClient:
    """Return the shared BingArchiveClient stored on the FastAPI app."""
    client = getattr(request.app.state, "archive_client", None)
    if client is None:
        logger.error("Archive client requested before initialization.")
        raise UnhandledFailure("Archive client is not available.")
    return client


def get_resolver(
    settings: Settings = Depends(get_settings),
    client: BingArchiveClient = Depends(get_archive_client),
) -> WallpaperResolver:
    """Dependency provider for WallpaperResolver."""
    return WallpaperResolver(client, default_dimension=settings.default_dimension)


async def relay_image_bytes(upstream: httpx.Response) -> AsyncIterator[bytes]:
    """Yield the upstream body, closing the response however iteration ends."""
    try:
        async for chunk in upstream.aiter_bytes():
            yield chunk
    finally:
        await upstream.aclose()


async def _stream_image(client: BingArchiveClient, url: str, settings: Settings) -> StreamingResponse:
    upstream = await client.open_image_stream(url)
    return StreamingResponse(
        relay_image_bytes(upstream),
        media_type=IMAGE_MEDIA_TYPE,
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age_seconds}"},
    )


@router.api_route(
    "/{path:path}",
    methods=WALLPAPER_METHODS,
    response_model=WallpaperInfo,
    response_model_exclude_none=True,
    responses={
        status.HTTP_200_OK: {"content": {IMAGE_MEDIA_TYPE: {}}},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def wallpaper(
    request: Request,
    response: Response,
    region: Optional[str] = Query(default=None, description="Market code, e.g. 'ja-JP'."),
    date: Optional[str] = Query(default=None, description="Calendar date of the wallpaper."),
    dpi: Optional[str] = Query(default=None, description="Resolution label, e.g. '4k'."),
    request_type: Optional[str] = Query(
        default=None,
        alias="type",
        description="'image' streams the picture; anything else returns JSON.",
    ),
    settings: Settings = Depends(get_settings),
    resolver: WallpaperResolver = Depends(get_resolver),
):
    """Describe the Bing wallpaper for a day, or stream the image itself."""
    prefix = settings.require_path_prefix
    if prefix and not request.url.path.startswith(prefix):
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

    try:
        resolution = await resolver.resolve(
            region=region or None,
            date=date or None,
            dpi=dpi or None,
        )
        if request_type == IMAGE_REQUEST_TYPE:
            return await _stream_image(resolver.client, resolution.image_url, settings)
    except WallpaperError:
        raise
    except Exception as exc:
        raise UnhandledFailure(str(exc)) from exc

    if settings.emit_cors_header:
        response.headers["Access-Control-Allow-Origin"] = "*"
    return resolution.info
