"""Infrastructure adapters for the tile bounded context.

This module provides the infrastructure layer implementations for tile
operations, including decoding SRTM tiles from ``.hgt`` files.
"""

from .hgt_adapter import HgtTileAdapter, decode_samples

__all__ = ["HgtTileAdapter", "decode_samples"]
