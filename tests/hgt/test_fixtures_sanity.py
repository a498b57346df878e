"""Sanity tests for generated ``.hgt`` fixtures.

These tests validate that each fixture:
1. Exists on disk
2. Loads (or fails) through the real adapter as expected

Fixtures are produced by scripts/gen_fixtures.py and are not committed; the
whole module is skipped until they have been generated.

Run: PYTHONPATH=src:. python scripts/gen_fixtures.py
     pytest tests/hgt/test_fixtures_sanity.py -m integration
"""

from pathlib import Path

import pytest

from domain.tile.errors import FilesizeError
from domain.tile.value_objects import Resolution, Tile
from tests.conftest_utils import get_fixtures_dir
from tests.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES

FIXTURES_DIR = get_fixtures_dir()

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not FIXTURES_DIR.is_dir(),
        reason="Fixtures not generated. Run scripts/gen_fixtures.py",
    ),
]


def fixture_path(name: str) -> Path:
    """Get path to a fixture file."""
    return FIXTURES_DIR / name


class TestFixturesExist:
    """Verify all required fixtures exist."""

    @pytest.mark.parametrize("filename", EXPECTED_FIXTURES)
    def test_fixture_exists(self, filename: str) -> None:
        assert fixture_path(filename).exists(), f"Missing fixture: {filename}"

    def test_fixture_count(self) -> None:
        found = sorted(p.name for p in FIXTURES_DIR.glob("*.hgt"))
        assert len(found) == EXPECTED_FIXTURE_COUNT


class TestFixturesLoad:
    """Verify fixtures decode to their documented contents."""

    def test_gradient(self) -> None:
        tile = Tile.from_path(fixture_path("N35E138.hgt"))
        assert tile.resolution is Resolution.SRTM3
        assert tile.get(0, 0) == 0
        assert tile.get(10, 20) == 30
        assert tile.get(1200, 1200) == 2400

    def test_single_peak(self) -> None:
        tile = Tile.from_path(fixture_path("N35E139.hgt"))
        assert tile.max_height() == 32000
        assert tile.get(600, 300) == 32000

    def test_below_sea_level(self) -> None:
        tile = Tile.from_path(fixture_path("S35W138.hgt"))
        assert (tile.latitude, tile.longitude) == (-35, -138)
        assert tile.max_height() == -400
        assert tile.min_height() == -32768

    def test_bad_size(self) -> None:
        with pytest.raises(FilesizeError):
            Tile.from_path(fixture_path("N35E140.hgt"))
