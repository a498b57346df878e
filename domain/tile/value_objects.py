"""Tile Bounded Context - Value Objects.

Immutable data structures representing one decoded SRTM tile.
All validation occurs at construction time via Pydantic.

On-disk layout of an ``.hgt`` file: a flat run of big-endian signed 16-bit
samples, row-major, northernmost row first. The total byte length is the only
thing that tells the two resolutions apart.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, model_validator

# ---------------------------------------------------------------------------
# Format Constants
# ---------------------------------------------------------------------------
SAMPLE_BYTES = 2  # int16
SAMPLE_DTYPE = ">i2"  # big-endian int16, as stored on disk


class Resolution(Enum):
    """SRTM sampling grade (Value Object).

    Each member's value is the grid extent (samples per side). This enum is the
    only table of the format: sample count and file size derive from it, so a
    new grade needs exactly one new member.
    """

    SRTM1 = 3601  # 1 arc-second, ~30 m
    SRTM3 = 1201  # 3 arc-second, ~90 m

    @property
    def extent(self) -> int:
        return self.value

    @property
    def sample_count(self) -> int:
        return self.value * self.value

    @property
    def byte_length(self) -> int:
        return self.sample_count * SAMPLE_BYTES


class Tile(BaseModel):
    """Decoded SRTM tile: coordinates, resolution and elevation grid.

    ``samples`` is a flat row-major buffer indexed by ``row * extent + col``.
    It is copied into an owned, native-endian int16 array and made read-only
    at construction time, so a Tile never changes after it is built.

    Invariants:
        T-1: samples is 1D
        T-2: len(samples) == resolution.extent ** 2
        T-3: samples dtype is a 16-bit signed integer
    """

    latitude: int  # Southwest corner, signed degrees (unchecked range)
    longitude: int  # Southwest corner, signed degrees (unchecked range)
    resolution: Resolution
    samples: NDArray[np.int16]  # Flat row-major grid, read-only

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_samples(self) -> "Tile":
        if self.samples.ndim != 1:
            raise ValueError(f"Samples must be 1D, got {self.samples.ndim}D")
        if self.samples.dtype.kind != "i" or self.samples.dtype.itemsize != 2:
            raise ValueError(f"Samples must be int16, got {self.samples.dtype}")
        expected = self.resolution.sample_count
        if self.samples.shape[0] != expected:
            raise ValueError(
                f"{self.resolution.name} tile needs {expected} samples, "
                f"got {self.samples.shape[0]}"
            )

        owned = np.array(self.samples, dtype=np.int16, copy=True, order="C")
        owned.flags.writeable = False
        object.__setattr__(self, "samples", owned)

        return self

    @classmethod
    def from_path(cls, path: Path | str, *, strict_hemisphere: bool = False) -> "Tile":
        """Load a tile from an ``.hgt`` file.

        Shortcut for ``HgtTileAdapter(strict_hemisphere).load_tile(path)``.

        Raises:
            ParseLatLongError: filename stem is malformed
            FilesizeError: file size matches no resolution
            ReadError: file cannot be opened or is truncated
        """
        from infrastructure.tile.hgt_adapter import HgtTileAdapter

        return HgtTileAdapter(strict_hemisphere=strict_hemisphere).load_tile(path)

    @property
    def name(self) -> str:
        """Canonical file stem for this tile, e.g. ``N35E138``."""
        from domain.tile.services import tile_name

        return tile_name(self.latitude, self.longitude)

    def extent(self) -> int:
        """Return the grid side length (3601 or 1201)."""
        return self.resolution.extent

    def max_height(self) -> int:
        return int(self.samples.max())

    def min_height(self) -> int:
        return int(self.samples.min())

    def get(self, x: int, y: int) -> int:
        """Return the sample at column ``x``, row ``y`` (0-indexed).

        Raises:
            IndexError: if either index lies outside ``[0, extent)``.
                Negative indices are rejected, not wrapped.
        """
        extent = self.extent()
        if not (0 <= x < extent and 0 <= y < extent):
            raise IndexError(f"({x}, {y}) outside {extent}x{extent} grid")
        return int(self.samples[y * extent + x])

    def as_array(self) -> NDArray[np.int16]:
        """Return a read-only (row, col) view of the grid (no copy)."""
        extent = self.extent()
        return self.samples.reshape(extent, extent)
