"""SRTM Tile Domain Layer.

This package contains the core logic organized by bounded contexts:
- tile: filename coordinates, resolution detection, elevation grid
"""

from domain import tile

__all__ = ["tile"]
