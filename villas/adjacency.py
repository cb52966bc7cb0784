"""Orthogonal neighbour helpers and bounding rectangles.

All helpers work on (row, col) pairs against a dense ``rows x cols`` area with
origin 0. Diagonals are never neighbours here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

Coord2D = Tuple[int, int]

ORTHOGONAL: Tuple[Coord2D, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def orthogonal_neighbors(row: int, col: int, rows: int, cols: int) -> Iterator[Coord2D]:
    """Yield the up/down/left/right neighbours of (row, col) that exist in the area."""
    for dr, dc in ORTHOGONAL:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, rows, cols):
            yield nr, nc


@dataclass(frozen=True)
class BoundingBox:
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def rows(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cols(self) -> int:
        return self.max_col - self.min_col + 1

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col

    def to_local(self, row: int, col: int) -> Coord2D:
        return row - self.min_row, col - self.min_col


def bounding_box(coords: Iterable[Coord2D]) -> BoundingBox:
    coords = list(coords)
    if not coords:
        raise ValueError("bounding_box() requires at least one coordinate")
    rows = [r for r, _ in coords]
    cols = [c for _, c in coords]
    return BoundingBox(min(rows), max(rows), min(cols), max(cols))


__all__ = ["Coord2D", "ORTHOGONAL", "in_bounds", "orthogonal_neighbors", "BoundingBox", "bounding_box"]
