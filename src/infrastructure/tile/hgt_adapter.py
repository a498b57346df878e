"""HGT adapter for TileRepository.

Implements loading of SRTM tiles from raw ``.hgt`` files, returning a domain
Tile Value Object.

Lifecycle (to avoid resource leaks):
1) Parse latitude/longitude from the filename stem
2) Stat the file and detect resolution from its byte length
3) Open the file with a context manager
4) Decode exactly extent*extent big-endian int16 samples
5) Close the file, build and return the Tile
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np
from numpy.typing import NDArray

from domain.tile.errors import FilesizeError, ReadError
from domain.tile.services import detect_resolution, parse_coordinates
from domain.tile.value_objects import SAMPLE_DTYPE, Resolution, Tile

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def decode_samples(stream: BinaryIO, resolution: Resolution) -> NDArray[np.int16]:
    """Decode a full grid of big-endian int16 samples from a binary stream.

    Reads exactly ``resolution.byte_length`` bytes, looping over short reads.
    Bytes after that are never inspected.

    Args:
        stream: Readable binary stream positioned at the first sample
        resolution: Grid resolution, decides how many samples to read

    Returns:
        Flat row-major native int16 array of length extent*extent.

    Raises:
        ReadError: if the stream ends early or the read fails
    """
    expected = resolution.byte_length
    buf = bytearray()
    try:
        while len(buf) < expected:
            chunk = stream.read(expected - len(buf))
            if not chunk:
                break
            buf += chunk
    except OSError as e:
        raise ReadError(f"I/O error after {len(buf)} bytes: {e}") from e

    if len(buf) < expected:
        raise ReadError(
            f"Stream ended after {len(buf)} of {expected} bytes "
            f"({resolution.name})"
        )

    return np.frombuffer(buf, dtype=SAMPLE_DTYPE).astype(np.int16)


class HgtTileAdapter:
    """Infrastructure adapter for loading tiles from ``.hgt`` files.

    Parameters
    ----------
    strict_hemisphere: bool
        Reject hemisphere letters other than N/S and E/W in the filename.
        Off by default, in which case any other letter reads as south/west.
    """

    def __init__(self, strict_hemisphere: bool = False) -> None:
        self.strict_hemisphere = strict_hemisphere

    def load_tile(self, file_path: Path | str) -> Tile:
        """Load one ``.hgt`` file and return a fully populated Tile.

        Raises:
            ParseLatLongError: filename stem is malformed
            FilesizeError: file size is unknown or matches no resolution
            ReadError: file cannot be opened or is truncated
        """
        path = Path(file_path)

        lat, lon = parse_coordinates(
            path.stem, strict_hemisphere=self.strict_hemisphere
        )

        try:
            size = path.stat().st_size
        except OSError as e:
            # Log only filename, errno, and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to stat %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise FilesizeError(f"Cannot determine size of {path.name}") from e

        resolution = detect_resolution(size)
        if resolution is None:
            logger.warning("Tile %s: unrecognized file size %dB", path.name, size)
            raise FilesizeError(f"Unrecognized SRTM file size: {size}B")

        try:
            with path.open("rb") as f:
                samples = decode_samples(f, resolution)
        except OSError as e:
            logger.error(
                "Failed to open %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise ReadError(f"Cannot open {path.name}") from e

        tile = Tile(latitude=lat, longitude=lon, resolution=resolution, samples=samples)

        extent = resolution.extent
        logger.debug(
            "Tile %s: Loaded %dx%d grid (%s)",
            path.name,
            extent,
            extent,
            resolution.name,
        )
        return tile
