"""Domain Port(s) for Tile I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import Tile


class TileRepository(Protocol):
    """Port for obtaining tiles from external sources.

    Implementations live in infrastructure (e.g., HGT adapter).
    """

    def load_tile(self, file_path: Path | str) -> Tile:
        """Load one SRTM tile and return a fully populated Tile."""
        ...
