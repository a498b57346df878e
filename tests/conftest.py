"""Root pytest configuration for all tests.

Provides factories for synthetic ``.hgt`` files so tests never depend on
real SRTM downloads.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray

from domain.tile.value_objects import Resolution
from tests.conftest_utils import gradient_grid, write_hgt


@pytest.fixture
def srtm3_grid() -> NDArray[np.int16]:
    """Known-value SRTM3 grid (1201x1201)."""
    return gradient_grid(Resolution.SRTM3.extent)


@pytest.fixture
def make_hgt(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an ``.hgt`` file into tmp_path.

    Usage:
        path = make_hgt("N35E138", grid)
        path = make_hgt("N35E138", raw=b"...")
    """

    def _make(
        stem: str,
        data: NDArray[Any] | None = None,
        *,
        raw: bytes | None = None,
        suffix: str = ".hgt",
    ) -> Path:
        path = tmp_path / f"{stem}{suffix}"
        if raw is not None:
            path.write_bytes(raw)
            return path
        if data is None:
            data = np.zeros(Resolution.SRTM3.sample_count, dtype=np.int16)
        return write_hgt(path, data)

    return _make
