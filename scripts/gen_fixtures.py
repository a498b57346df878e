#!/usr/bin/env python3
"""Generate synthetic ``.hgt`` fixtures for tile loading tests.

Fixtures are minimal synthetic SRTM3 grids - not real terrain data.

Usage:
    PYTHONPATH=src:. python scripts/gen_fixtures.py

Requirements:
    pip install numpy

Output:
    tests/fixtures/*.hgt

Dependencies:
    This script imports from shared/ (not tests/) to avoid
    circular dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from domain.tile.services import tile_name
from domain.tile.value_objects import Resolution
from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES
from shared.hgt_writer import write_hgt

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"

EXTENT = Resolution.SRTM3.extent
PEAK_M = 32000


def ensure_dir() -> None:
    """Ensure fixtures directory exists."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Output directory: {FIXTURES_DIR}")


# =============================================================================
# Helper: write_grid
# =============================================================================
def write_grid(lat: int, lon: int, data: NDArray[np.int16]) -> None:
    """Write a square grid to the fixture named after (lat, lon)."""
    path = write_hgt(FIXTURES_DIR / f"{tile_name(lat, lon)}.hgt", data)
    print(f"  Created: {path.name} ({data.shape[0]}x{data.shape[1]})")


# =============================================================================
# Fixtures
# =============================================================================
def gen_gradient() -> None:
    """N35E138: value = (row + col) % 4000, so every cell is predictable."""
    rows, cols = np.indices((EXTENT, EXTENT))
    data = ((rows + cols) % 4000).astype(np.int16)
    write_grid(35, 138, data)


def gen_single_peak() -> None:
    """N35E139: all zeros except one 32000 m cell at (x=600, y=300)."""
    data = np.zeros((EXTENT, EXTENT), dtype=np.int16)
    data[300, 600] = PEAK_M
    write_grid(35, 139, data)


def gen_below_sea_level() -> None:
    """S35W138: constant -400 m with a -32768 void marker in the corner."""
    data = np.full((EXTENT, EXTENT), -400, dtype=np.int16)
    data[0, 0] = -32768
    write_grid(-35, -138, data)


def gen_bad_size() -> None:
    """N35E140: 100 bytes, matches no resolution."""
    path = FIXTURES_DIR / f"{tile_name(35, 140)}.hgt"
    path.write_bytes(bytes(100))
    print(f"  Created: {path.name} (100B)")


def main() -> int:
    ensure_dir()

    print("Gradient (known values)")
    gen_gradient()

    print("\nSingle peak")
    gen_single_peak()

    print("\nBelow sea level")
    gen_below_sea_level()

    print("\nUnrecognized size")
    gen_bad_size()

    fixture_files = sorted(
        f.name for f in FIXTURES_DIR.iterdir() if f.is_file() and f.suffix == ".hgt"
    )
    found_set = set(fixture_files)
    expected_set = set(EXPECTED_FIXTURES)

    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
