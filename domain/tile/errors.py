"""Tile Bounded Context - Error Hierarchy.

Custom exceptions raised while building a Tile from an ``.hgt`` file.
The three kinds are flat and terminal: no retry, no partial Tile.
"""

from __future__ import annotations


class TileError(Exception):
    """Base error for tile operations."""


class ParseLatLongError(TileError):
    """Filename stem does not follow the ``[N|S]DD[E|W]DDD`` convention."""


class FilesizeError(TileError):
    """File byte length matches no known SRTM resolution."""


class ReadError(TileError):
    """File could not be opened, or ended before the full grid was read."""
