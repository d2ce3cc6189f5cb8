"""Static lookup tables shared by the wallpaper service."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

BING_HOST: Final[str] = "https://www.bing.com"
ARCHIVE_PATH: Final[str] = "/HPImageArchive.aspx"
ARCHIVE_RESULT_COUNT: Final[int] = 1
ARCHIVE_FORMAT: Final[str] = "js"

DEFAULT_REGION: Final[str] = "en-US"
REGIONS: Final[frozenset[str]] = frozenset(
    {"zh-CN", "en-US", "ja-JP", "en-AU", "en-UK", "de-DE", "en-NZ", "en-CA"}
)

DEFAULT_DIMENSION: Final[str] = "1920x1080"
IMAGE_MEDIA_TYPE: Final[str] = "image/jpeg"
IMAGE_REQUEST_TYPE: Final[str] = "image"

# Label -> "WIDTHxHEIGHT". Declaration order is significant for the cover list.
DPI_MAPPINGS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "720": "1280x720",
        "1080": "1920x1080",
        "720p": "1280x720",
        "1080p": "1920x1080",
        "1080i": "1920x1080",
        "hd": "1920x1080",
        "uhd": "1920x1080",
        "2k": "1920x1080",
        "2.5k": "1920x1200",
        "2.8k": "1920x1200",
        "4k": "1920x1080",
        "m": "720x1280",
        "small": "1280x720",
        "thumbnail": "320x240",
        "mobile": "720x1280",
        "original": "1920x1200",
        "1920x1200": "1920x1200",
        "1920x1080": "1920x1080",
        "1366x768": "1366x768",
        "1280x768": "1280x768",
        "1280x720": "1280x720",
        "1024x768": "1024x768",
        "800x600": "800x600",
        "800x480": "800x480",
        "768x1280": "768x1280",
        "720x1280": "720x1280",
        "640x480": "640x480",
        "480x800": "480x800",
        "400x240": "400x240",
        "320x240": "320x240",
        "240x320": "240x320",
    }
)
