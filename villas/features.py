"""Feature: one tile placed at one grid coordinate.

Coordinates are not range checked here; bounds belong to whatever owns the
feature (a Room's bounding rectangle or a Lattice's fixed size).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import NullTileError
from .tiles import Tile


@dataclass(frozen=True)
class Feature:
    tile: Tile
    row: int
    col: int

    def __post_init__(self):
        if self.tile is None:
            raise NullTileError("Feature tile must not be None")
        if not isinstance(self.tile, Tile):
            raise TypeError(f"Feature tile must be a Tile, got {self.tile!r}")

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.row, self.col)

    # Unpacks as (tile, row, col) so features can be fed straight to Lattice.place_many
    def __iter__(self) -> Iterator:
        return iter((self.tile, self.row, self.col))

    def __repr__(self) -> str:
        return f"{self.tile.value}({self.row}, {self.col})"


def floor(row: int, col: int) -> Feature:
    return Feature(Tile.FLOOR, row, col)


def door(row: int, col: int) -> Feature:
    return Feature(Tile.DOOR, row, col)


def stair(row: int, col: int) -> Feature:
    return Feature(Tile.STAIR, row, col)


def wall(row: int, col: int) -> Feature:
    return Feature(Tile.WALL, row, col)


__all__ = ["Feature", "floor", "door", "stair", "wall"]
