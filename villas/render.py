"""Textual rendering of tile regions for diagnostics.

One line per row, one glyph per cell, rows joined by a single newline and no
trailing separator. Output is meant for humans reading error messages; it is
never parsed back.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .adjacency import BoundingBox, bounding_box
from .tiles import Tile


def render_rows(rows: Iterable[Iterable[Tile]]) -> str:
    return "\n".join("".join(tile.glyph for tile in row) for row in rows)


def tile_grid(features: Iterable, box: Optional[BoundingBox] = None) -> List[List[Tile]]:
    """Dense grid over ``box`` (default: the features' bounding rectangle).

    Unspecified cells are walls. Features are overlaid in order, so a later
    feature at a repeated coordinate wins.
    """
    features = list(features)
    if box is None:
        box = bounding_box(f.coord for f in features)
    grid = [[Tile.WALL] * box.cols for _ in range(box.rows)]
    for f in features:
        r, c = box.to_local(f.row, f.col)
        grid[r][c] = f.tile
    return grid


def render_features(features: Iterable) -> str:
    """Render the sub-rectangle spanned by ``features``; empty input renders as ''."""
    features = list(features)
    if not features:
        return ""
    return render_rows(tile_grid(features))


__all__ = ["render_rows", "render_features", "tile_grid"]
