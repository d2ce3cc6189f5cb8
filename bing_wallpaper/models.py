"""Pydantic models for the Bing archive payload and the service API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def format_archive_date(value: str) -> str:
    """Turn an archive 'YYYYMMDD' stamp into 'YYYY-MM-DD'."""
    return f"{value[:4]}-{value[4:6]}-{value[6:]}"


class ArchiveImage(BaseModel):
    """One day's entry from the Bing HPImageArchive payload."""

    model_config = ConfigDict(extra="ignore")

    startdate: str = Field(description='Start date stamp formatted as "YYYYMMDD".')
    enddate: str = Field(description='End date stamp formatted as "YYYYMMDD".')
    title: str = Field(default="")
    copyright: str = Field(default="")
    urlbase: str = Field(
        description="Host-relative path prefix, without resolution suffix or extension.",
    )


class ArchivePayload(BaseModel):
    """Top-level HPImageArchive response body."""

    model_config = ConfigDict(extra="ignore")

    images: list[ArchiveImage] = Field(default_factory=list)


class Cover(BaseModel):
    """A resolution label paired with its full image URL."""

    dpi: str = Field(description='Resolution label, e.g. "4k" or "mobile".')
    url: str = Field(description="Absolute image URL for the label's dimension.")


class WallpaperInfo(BaseModel):
    """Response body for the info (JSON) mode."""

    startdate: str = Field(description='Start date formatted as "YYYY-MM-DD".')
    enddate: str = Field(description='End date formatted as "YYYY-MM-DD".')
    title: str
    copyright: str
    cover: list[Cover] = Field(
        default_factory=list,
        description="One entry per resolution label; the default dimension comes first.",
    )
    selected_cover: Optional[Cover] = Field(
        default=None,
        description="The cover matching the requested dpi, when it is a known label.",
    )


class ErrorResponse(BaseModel):
    """Response body for failed requests."""

    error: str
