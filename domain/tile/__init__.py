"""Tile Bounded Context.

Responsible for decoding a single SRTM tile:
- Value Objects: Resolution, Tile
- Services: parse_coordinates, detect_resolution, tile_name
"""
