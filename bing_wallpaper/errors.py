"""Exception types surfaced by the wallpaper service."""

from __future__ import annotations


class WallpaperError(RuntimeError):
    """Base exception for wallpaper request failures."""


class UpstreamFailure(WallpaperError):
    """Raised when the Bing archive or image host cannot be used."""


class InvalidDate(WallpaperError):
    """Raised when the requested date cannot be parsed."""


class UnhandledFailure(WallpaperError):
    """Wraps any other exception raised while handling a request."""
