"""Resolution label helpers."""

from __future__ import annotations

from typing import Mapping, Tuple

from .constants import DPI_MAPPINGS


def parse_dimension(dimension: str) -> Tuple[int, int]:
    """Parse a dimension string formatted as '<width>x<height>'."""
    if not dimension:
        raise ValueError("Dimension value is required.")

    parts = dimension.lower().split("x")
    if len(parts) != 2:
        raise ValueError("Dimension must be formatted as '<width>x<height>'.")

    try:
        width, height = (int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise ValueError("Dimension values must be integers.") from exc

    if width <= 0 or height <= 0:
        raise ValueError("Dimension values must be positive integers.")

    return width, height


def ordered_resolutions(
    default_dimension: str,
    mappings: Mapping[str, str] = DPI_MAPPINGS,
) -> list[tuple[str, str]]:
    """
    Return (label, dimension) pairs with the default dimension first.

    Entries mapping to ``default_dimension`` are moved to the front; both groups
    keep their declared relative order.
    """
    preferred = [(label, dim) for label, dim in mappings.items() if dim == default_dimension]
    remaining = [(label, dim) for label, dim in mappings.items() if dim != default_dimension]
    return preferred + remaining
