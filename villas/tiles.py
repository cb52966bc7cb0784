"""Tile vocabulary shared by the lattice and room validation.

Each variant carries a display glyph and a walkability flag. The attributes
live in a lookup table keyed by variant instead of per-variant subclasses.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple


class TileInfo(NamedTuple):
    glyph: str
    walkable: bool


class Tile(Enum):
    WALL = "wall"
    FLOOR = "floor"
    DOOR = "door"
    STAIR = "stair"

    @property
    def glyph(self) -> str:
        return TILE_INFO[self].glyph

    @property
    def walkable(self) -> bool:
        return TILE_INFO[self].walkable

    @classmethod
    def from_name(cls, name: str) -> "Tile":
        """Resolve a case-insensitive variant name such as ``"door"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown tile {name!r}; expected one of: {valid}") from None

    def __str__(self) -> str:
        return self.glyph


TILE_INFO: Dict[Tile, TileInfo] = {
    Tile.WALL: TileInfo(" ", False),
    Tile.FLOOR: TileInfo("-", True),
    Tile.DOOR: TileInfo("D", True),
    Tile.STAIR: TileInfo("x", True),
}

# Module level aliases mirroring the short constant names used across the package
WALL = Tile.WALL
FLOOR = Tile.FLOOR
DOOR = Tile.DOOR
STAIR = Tile.STAIR

__all__ = ["Tile", "TileInfo", "TILE_INFO", "WALL", "FLOOR", "DOOR", "STAIR"]
