"""Unit tests for day offsets, region fallback and cover selection."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from bing_wallpaper.constants import DEFAULT_REGION, DPI_MAPPINGS, REGIONS
from bing_wallpaper.errors import InvalidDate
from bing_wallpaper.models import ArchiveImage
from bing_wallpaper.resolver import (
    build_covers,
    build_resolution,
    compute_day_offset,
    parse_request_date,
    resolve_region,
    select_cover,
)

HOST = "https://www.bing.com"
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_image() -> ArchiveImage:
    return ArchiveImage(
        startdate="20240614",
        enddate="20240615",
        title="Lavender fields",
        copyright="Valensole, France",
        urlbase="/az/hprichbg/rb/Lavender_EN-US123",
    )


@pytest.mark.parametrize("date", [None, ""])
def test_missing_date_means_today(date):
    assert compute_day_offset(date, now=NOW) == 0


@pytest.mark.parametrize(
    ("date", "expected"),
    [
        ("2024-06-15", 0),
        ("2024-06-14", 1),
        ("20240610", 5),
        ("2024/06/01", 14),
        ("2024-06-14T13:00:00Z", 0),
        ("2024-06-15T08:00:00+08:00", 0),
    ],
)
def test_day_offset_counts_whole_days(date, expected):
    assert compute_day_offset(date, now=NOW) == expected


@pytest.mark.parametrize(
    "date",
    [
        "2024-1-15",
        "2024/1/15",
        "01/15/2024",
        "1/15/2024",
        "Jan 15, 2024",
        "January 15, 2024",
        "15 Jan 2024",
        "Mon, 15 Jan 2024 00:00:00 GMT",
        "2024-01-15 06:30:00",
    ],
)
def test_common_date_spellings_are_accepted(date):
    assert compute_day_offset(date, now=NOW) == 152


def test_rfc2822_offsets_are_honoured():
    assert parse_request_date("Mon, 15 Jan 2024 09:00:00 +0900") == datetime(
        2024, 1, 15, 0, 0, tzinfo=timezone.utc
    )


def test_equidistant_past_and_future_dates_share_an_offset():
    past = (NOW - timedelta(days=3)).isoformat()
    future = (NOW + timedelta(days=3)).isoformat()

    assert compute_day_offset(past, now=NOW) == compute_day_offset(future, now=NOW) == 3


def test_naive_dates_are_read_as_utc():
    assert parse_request_date("20240101") == datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("date", ["not-a-date", "2024-13-40", "tomorrow"])
def test_unparseable_date_raises_invalid_date(date):
    with pytest.raises(InvalidDate):
        compute_day_offset(date, now=NOW)


@pytest.mark.parametrize("region", sorted(REGIONS))
def test_supported_regions_are_kept(region):
    assert resolve_region(region) == region


@pytest.mark.parametrize("region", [None, "", "fr-FR", "ja-jp", "EN-US"])
def test_unsupported_regions_fall_back_to_default(region):
    assert resolve_region(region) == DEFAULT_REGION


def test_build_covers_expands_every_label():
    covers = build_covers(make_image(), HOST)

    assert [cover.dpi for cover in covers].count("mobile") == 1
    assert len(covers) == len(DPI_MAPPINGS)
    assert covers[0].url == f"{HOST}/az/hprichbg/rb/Lavender_EN-US123_1920x1080.jpg"
    for cover in covers:
        assert cover.url.endswith(f"_{DPI_MAPPINGS[cover.dpi]}.jpg")


@pytest.mark.parametrize("dpi", [None, "", "8k", "MOBILE"])
def test_unknown_dpi_selects_nothing(dpi):
    covers = build_covers(make_image(), HOST)
    assert select_cover(covers, dpi) is None


def test_build_resolution_defaults_to_first_cover():
    resolution = build_resolution(make_image(), HOST, dpi="bogus")

    assert resolution.info.selected_cover is None
    assert resolution.image_url == resolution.info.cover[0].url
    assert resolution.info.startdate == "2024-06-14"
    assert resolution.info.enddate == "2024-06-15"


@pytest.mark.parametrize("dpi", list(DPI_MAPPINGS))
def test_build_resolution_selects_requested_label(dpi):
    resolution = build_resolution(make_image(), HOST, dpi=dpi)

    selected = resolution.info.selected_cover
    assert selected is not None
    assert selected.dpi == dpi
    assert selected.url.endswith(f"_{DPI_MAPPINGS[dpi]}.jpg")
    assert resolution.image_url == selected.url


def test_alternate_default_dimension_moves_to_front():
    resolution = build_resolution(make_image(), HOST, default_dimension="720x1280")

    assert resolution.info.cover[0].dpi == "m"
    assert resolution.image_url.endswith("_720x1280.jpg")
