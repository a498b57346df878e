"""Writer for synthetic ``.hgt`` files.

Used by both scripts/gen_fixtures.py and the test suite so fixtures on disk and
fixtures in tmp_path are produced the same way.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray

from domain.tile.value_objects import SAMPLE_DTYPE


def write_hgt(path: Path, data: NDArray[Any]) -> Path:
    """Write samples to ``path`` as big-endian int16, row-major, top row first.

    Accepts a flat array or a square 2D grid; returns ``path`` for chaining.
    Sample count is not checked so short or odd-sized files can be written.
    """
    arr = np.asarray(data)
    if arr.ndim == 2 and arr.shape[0] != arr.shape[1]:
        raise ValueError(f"2D data must be a square grid, got shape {arr.shape}")
    if arr.ndim not in (1, 2):
        raise ValueError(f"Data must be 1D or 2D, got {arr.ndim}D")
    arr.astype(SAMPLE_DTYPE).tofile(path)
    return path
