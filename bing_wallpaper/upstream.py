"""Async client for the Bing image archive and image host."""

from __future__ import annotations

import logging

import httpx

from .constants import ARCHIVE_FORMAT, ARCHIVE_PATH, ARCHIVE_RESULT_COUNT, BING_HOST
from .errors import UpstreamFailure
from .models import ArchiveImage, ArchivePayload

logger = logging.getLogger(__name__)


class BingArchiveClient:
    """Minimal async wrapper around the HPImageArchive endpoint."""

    def __init__(
        self,
        *,
        host: str = BING_HOST,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._client.aclose()

    def archive_url(self) -> str:
        return f"{self.host}{ARCHIVE_PATH}"

    async def fetch_image(self, day_offset: int, region: str) -> ArchiveImage:
        """Return the archive descriptor for ``day_offset`` days before today."""
        params = {
            "idx": day_offset,
            "n": ARCHIVE_RESULT_COUNT,
            "mkt": region,
            "format": ARCHIVE_FORMAT,
        }
        try:
            response = await self._client.get(self.archive_url(), params=params)
            response.raise_for_status()
            payload = ArchivePayload.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "Archive request failed",
                extra={"day_offset": day_offset, "region": region},
                exc_info=exc,
            )
            raise UpstreamFailure(str(exc)) from exc

        if not payload.images:
            raise UpstreamFailure("Archive response contained no images.")
        return payload.images[0]

    async def open_image_stream(self, url: str) -> httpx.Response:
        """
        Start downloading ``url`` and return the unread response.

        The caller owns the response and must ``aclose()`` it once the body
        has been consumed.
        """
        request = self._client.build_request("GET", url)
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            logger.warning("Image request failed", extra={"url": url}, exc_info=exc)
            raise UpstreamFailure(str(exc)) from exc

        if response.is_error:
            await response.aclose()
            raise UpstreamFailure(f"Image host returned HTTP {response.status_code} for {url}")
        return response
