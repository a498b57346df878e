"""Single source of truth for expected ``.hgt`` test fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/hgt/test_fixtures_sanity.py (existence verification)

Location: shared/ (not tests/) to avoid scripts->tests dependency.

When adding/removing fixtures, update ONLY this list.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "N35E138.hgt",  # SRTM3 gradient, known values
        "N35E139.hgt",  # SRTM3 all zeros with one 32000 peak
        "S35W138.hgt",  # SRTM3 negative (below sea level) values
        "N35E140.hgt",  # Unrecognized size (100 bytes)
    ]
)

# Count derived from list for verification
EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
