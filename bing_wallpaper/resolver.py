"""Turn request parameters into a resolved wallpaper description."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Callable, Optional, Sequence

from .constants import DEFAULT_DIMENSION, DEFAULT_REGION, DPI_MAPPINGS, REGIONS
from .errors import InvalidDate
from .models import ArchiveImage, Cover, WallpaperInfo, format_archive_date
from .resolution import ordered_resolutions
from .upstream import BingArchiveClient

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
# strptime accepts unpadded months and days, so "2024-1-15" matches "%Y-%m-%d".
_FALLBACK_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%d %b %Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y %H:%M:%S",
)


@dataclass(frozen=True)
class Resolution:
    """Info payload plus the URL to stream in image mode."""

    info: WallpaperInfo
    image_url: str


def _parse_with_formats(text: str) -> Optional[datetime]:
    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _parse_rfc2822(text: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError):
        return None


def parse_request_date(value: str) -> datetime:
    """
    Parse a requested date into an aware datetime.

    Accepts ISO 8601 in extended or basic form ("2024-01-01", "20240101",
    "2024-01-01T08:00:00+08:00"), unpadded dashes ("2024-1-15"), slashed
    ("2024/01/15", "01/15/2024"), month names ("Jan 15, 2024") and RFC 2822
    ("Mon, 15 Jan 2024 00:00:00 GMT"). Values without an offset are read as UTC.
    """
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = _parse_with_formats(text) or _parse_rfc2822(text)
        if parsed is None:
            raise InvalidDate(f"Invalid date: {value!r}") from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def compute_day_offset(date: Optional[str], now: Optional[datetime] = None) -> int:
    """
    Return the archive index for ``date``: whole days between it and ``now``.

    The distance is absolute, so a future date maps to the same index as the
    past date equally far away.
    """
    if not date:
        return 0
    current = now or datetime.now(timezone.utc)
    delta = current - parse_request_date(date)
    return int(abs(delta.total_seconds()) // SECONDS_PER_DAY)


def resolve_region(region: Optional[str]) -> str:
    """Return ``region`` when it is a supported market, else the default."""
    if region in REGIONS:
        return region
    return DEFAULT_REGION


def build_covers(image: ArchiveImage, host: str, default_dimension: str = DEFAULT_DIMENSION) -> list[Cover]:
    """Expand ``image.urlbase`` into one cover per resolution label."""
    return [
        Cover(dpi=label, url=f"{host}{image.urlbase}_{dimension}.jpg")
        for label, dimension in ordered_resolutions(default_dimension)
    ]


def select_cover(covers: Sequence[Cover], dpi: Optional[str]) -> Optional[Cover]:
    """Return the cover for a known ``dpi`` label; unknown labels select nothing."""
    if not dpi or dpi not in DPI_MAPPINGS:
        return None
    return next((cover for cover in covers if cover.dpi == dpi), None)


def build_resolution(
    image: ArchiveImage,
    host: str,
    *,
    dpi: Optional[str] = None,
    default_dimension: str = DEFAULT_DIMENSION,
) -> Resolution:
    """Assemble the info payload and pick the URL served in image mode."""
    covers = build_covers(image, host, default_dimension)
    selected = select_cover(covers, dpi)
    info = WallpaperInfo(
        startdate=format_archive_date(image.startdate),
        enddate=format_archive_date(image.enddate),
        title=image.title,
        copyright=image.copyright,
        cover=covers,
        selected_cover=selected,
    )
    image_url = selected.url if selected else covers[0].url
    return Resolution(info=info, image_url=image_url)


class WallpaperResolver:
    """Resolves one request against the Bing archive."""

    def __init__(
        self,
        client: BingArchiveClient,
        *,
        default_dimension: str = DEFAULT_DIMENSION,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.client = client
        self.default_dimension = default_dimension
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def resolve(
        self,
        *,
        region: Optional[str] = None,
        date: Optional[str] = None,
        dpi: Optional[str] = None,
    ) -> Resolution:
        day_offset = compute_day_offset(date, now=self._clock())
        market = resolve_region(region)

        logger.info(
            "Resolving wallpaper",
            extra={"region": market, "day_offset": day_offset, "dpi": dpi},
        )

        image = await self.client.fetch_image(day_offset, market)
        return build_resolution(
            image,
            self.client.host,
            dpi=dpi,
            default_dimension=self.default_dimension,
        )
