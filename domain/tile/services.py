"""Tile Bounded Context - Domain Services.

Pure domain logic for interpreting tile metadata.
NO I/O operations - file loading is implemented by infrastructure adapters
under `src/infrastructure/tile/hgt_adapter.py` via domain ports.
"""

from __future__ import annotations

import re

from domain.tile.errors import ParseLatLongError
from domain.tile.value_objects import Resolution

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
STEM_LENGTH = 7  # e.g. "N35E138"

# Byte length -> Resolution, derived from the enum so it never drifts
_RESOLUTION_BY_BYTE_LENGTH: dict[int, Resolution] = {
    res.byte_length: res for res in Resolution
}

# Optional sign followed by ASCII digits only (no whitespace, no underscores)
_INTEGER = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Resolution Detection
# ---------------------------------------------------------------------------
def detect_resolution(byte_length: int) -> Resolution | None:
    """Map a file's total byte length to its Resolution.

    Exact match only: 25934402 -> SRTM1, 2884802 -> SRTM3.

    Returns:
        The matching Resolution, or None for any other length.
    """
    return _RESOLUTION_BY_BYTE_LENGTH.get(byte_length)


# ---------------------------------------------------------------------------
# Coordinate Parsing
# ---------------------------------------------------------------------------
def _parse_int(text: str, stem: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParseLatLongError(f"Invalid number {text!r} in tile name {stem!r}")
    return int(text)


def parse_coordinates(stem: str, *, strict_hemisphere: bool = False) -> tuple[int, int]:
    """Parse a tile filename stem into signed (latitude, longitude) degrees.

    Expected format is ``[N|S]DD[E|W]DDD`` in 7 ASCII characters. By default
    the hemisphere letters are read leniently: anything other than ``N`` is
    south and anything other than ``E`` is west. ``strict_hemisphere=True``
    rejects unknown letters.

    No range check is applied to the result.

    Args:
        stem: Filename without extension, e.g. "N35E138"
        strict_hemisphere: Require exactly N/S and E/W

    Returns:
        (latitude, longitude), e.g. (35, 138) or (-35, -138)

    Raises:
        ParseLatLongError: if the stem is malformed
    """
    if len(stem) != STEM_LENGTH:
        raise ParseLatLongError(
            f"Tile name {stem!r} must be {STEM_LENGTH} characters, got {len(stem)}"
        )
    if not stem.isascii():
        raise ParseLatLongError(f"Tile name {stem!r} must be ASCII")

    lat_hemi, lon_hemi = stem[0], stem[3]
    if strict_hemisphere:
        if lat_hemi not in ("N", "S"):
            raise ParseLatLongError(f"Invalid latitude hemisphere {lat_hemi!r}")
        if lon_hemi not in ("E", "W"):
            raise ParseLatLongError(f"Invalid longitude hemisphere {lon_hemi!r}")

    lat_sign = 1 if lat_hemi == "N" else -1
    lat = _parse_int(stem[1:3], stem)

    lon_sign = 1 if lon_hemi == "E" else -1
    lon = _parse_int(stem[4:7], stem)

    return lat_sign * lat, lon_sign * lon


def tile_name(latitude: int, longitude: int) -> str:
    """Format signed degrees as a tile stem, e.g. (-35, 8) -> "S35E008"."""
    lat_str = f"N{latitude:02d}" if latitude >= 0 else f"S{abs(latitude):02d}"
    lon_str = f"E{longitude:03d}" if longitude >= 0 else f"W{abs(longitude):03d}"
    return f"{lat_str}{lon_str}"
