"""
project: Dwarven Villas
module: lattice.py
License: MIT

Fixed-size tile lattice with a one-way replacement policy.

Cells start as WALL. Once a cell holds architectural intent (floor, door,
stair) it can only be refined, never reverted:

    WALL  -> anything
    FLOOR -> FLOOR | DOOR
    DOOR  -> DOOR
    STAIR -> STAIR

The lattice is not internally synchronised; callers sharing one instance
across threads must serialise ``place``/``place_many`` themselves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, Tuple

from .errors import InvalidDimensionsError, InvalidTransitionError, NullTileError, OutOfBoundsError
from .features import Feature
from .render import render_rows
from .tiles import Tile

logger = logging.getLogger(__name__)

REPLACEMENTS: Dict[Tile, FrozenSet[Tile]] = {
    Tile.WALL: frozenset(Tile),
    Tile.FLOOR: frozenset({Tile.FLOOR, Tile.DOOR}),
    Tile.DOOR: frozenset({Tile.DOOR}),
    Tile.STAIR: frozenset({Tile.STAIR}),
}


def can_replace(current: Tile, new: Tile) -> bool:
    return new in REPLACEMENTS[current]


@dataclass(frozen=True)
class Bounds:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0:
            raise InvalidDimensionsError("width", self.width)
        if self.height <= 0:
            raise InvalidDimensionsError("height", self.height)

    @property
    def rows(self) -> int:
        return self.height

    @property
    def columns(self) -> int:
        return self.width

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self)


def _require_tile(tile) -> Tile:
    if tile is None:
        raise NullTileError()
    if not isinstance(tile, Tile):
        raise TypeError(f"Expected a Tile, got {tile!r}")
    return tile


class Lattice:
    def __init__(self, width: int, height: int):
        self._bounds = Bounds(width, height)
        self._tiles = [[Tile.WALL] * width for _ in range(height)]

    def place(self, tile: Tile, row: int, col: int) -> None:
        _require_tile(tile)
        self._bounds.check(row, col)
        current = self._tiles[row][col]
        if not can_replace(current, tile):
            logger.debug("Rejected placement %s -> %s at [%s][%s]", current.name, tile.name, row, col)
            raise InvalidTransitionError(current, tile, row, col)
        self._tiles[row][col] = tile

    def place_many(self, placements: Iterable[Tuple[Tile, int, int]]) -> None:
        """Apply ``(tile, row, col)`` triples in order, exactly as repeated ``place`` calls would.

        The first failing triple propagates its error; cells written by earlier
        triples stay written.
        """
        for tile, row, col in placements:
            self.place(tile, row, col)

    def get(self, row: int, col: int) -> Tile:
        self._bounds.check(row, col)
        return self._tiles[row][col]

    def bounds(self) -> Bounds:
        return self._bounds

    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    def features(self) -> Iterator[Feature]:
        """Yield every committed (non-wall) cell as a Feature, row-major."""
        for r, row in enumerate(self._tiles):
            for c, tile in enumerate(row):
                if tile is not Tile.WALL:
                    yield Feature(tile, r, c)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Lattice):
            return NotImplemented
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self.rows())

    def __str__(self) -> str:
        return render_rows(self._tiles)

    def __repr__(self) -> str:
        return f"Lattice(width={self._bounds.width}, height={self._bounds.height})"


__all__ = ["Bounds", "Lattice", "REPLACEMENTS", "can_replace"]
