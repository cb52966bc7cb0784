"""
project: Dwarven Villas
module: room.py
License: MIT

Room: an immutable, pre-validated collection of features.

All checks run once, in the constructor, over a local dense grid covering the
bounding rectangle of every feature:

    * at least MIN_FLOOR_TILES floor features
    * no two features on the same coordinate
    * floors form one 4-connected region of FLOOR cells (doors and stairs do
      not bridge; diagonal contact is a disconnection)
    * every door touches a floor orthogonally and sits on the rectangle edge

Any failure aborts construction; there is no partially valid Room.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, NoReturn, Set, Tuple

from .adjacency import BoundingBox, Coord2D, bounding_box, orthogonal_neighbors
from .errors import (
    DisconnectedFloorError,
    IllegalDoorError,
    InsufficientFloorError,
    OverlappingFeatureError,
)
from .features import Feature
from .render import render_features, tile_grid
from .tiles import Tile

logger = logging.getLogger(__name__)

MIN_FLOOR_TILES = 3


@dataclass(frozen=True, init=False)
class Room:
    features: Tuple[Feature, ...]

    def __init__(self, features: Iterable[Feature]):
        if features is None:
            raise TypeError("Room features must not be None")
        features = tuple(features)
        for f in features:
            if not isinstance(f, Feature):
                raise TypeError(f"Room features must be Feature instances, got {f!r}")
        _validate(features)
        object.__setattr__(self, "features", features)

    @classmethod
    def of(cls, first: Feature, second: Feature, third: Feature, *others: Feature) -> "Room":
        return cls((first, second, third) + others)

    @property
    def floors(self) -> Tuple[Feature, ...]:
        return tuple(f for f in self.features if f.tile is Tile.FLOOR)

    @property
    def doors(self) -> Tuple[Feature, ...]:
        return tuple(f for f in self.features if f.tile is Tile.DOOR)

    def render(self) -> str:
        return render_features(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __str__(self) -> str:
        return self.render()


def _validate(features: Tuple[Feature, ...]) -> None:
    floors = [f for f in features if f.tile is Tile.FLOOR]
    if len(floors) < MIN_FLOOR_TILES:
        _fail(InsufficientFloorError(len(floors), MIN_FLOOR_TILES, render_features(features)))
    _check_overlaps(features)
    box = bounding_box(f.coord for f in features)
    grid = tile_grid(features, box)
    _check_continuous_floor(floors, grid, box, features)
    _check_doors(features, grid, box)


def _fail(exc: Exception) -> NoReturn:
    logger.debug("Room rejected (%s): %s", getattr(exc, "code", type(exc).__name__), exc)
    raise exc


def _check_overlaps(features: Tuple[Feature, ...]) -> None:
    seen: Dict[Coord2D, Feature] = {}
    clashes: List[Feature] = []
    for f in features:
        first = seen.setdefault(f.coord, f)
        if first is not f:
            if first not in clashes:
                clashes.append(first)
            clashes.append(f)
    if clashes:
        _fail(OverlappingFeatureError(clashes, render_features(features)))


def _walk_floor(origin: Feature, grid: List[List[Tile]], box: BoundingBox) -> Set[Coord2D]:
    start = box.to_local(origin.row, origin.col)
    pending = deque([start])
    visited = {start}
    while pending:
        r, c = pending.popleft()
        for nr, nc in orthogonal_neighbors(r, c, box.rows, box.cols):
            if (nr, nc) not in visited and grid[nr][nc] is Tile.FLOOR:
                visited.add((nr, nc))
                pending.append((nr, nc))
    return visited


def _check_continuous_floor(floors, grid, box, features) -> None:
    visited = _walk_floor(floors[0], grid, box)
    if len(visited) != len(floors):
        _fail(DisconnectedFloorError(len(visited), len(floors), render_features(features)))


def _is_door_legal(door: Feature, grid: List[List[Tile]], box: BoundingBox) -> bool:
    r, c = box.to_local(door.row, door.col)
    neighbours = list(orthogonal_neighbors(r, c, box.rows, box.cols))
    touches_floor = any(grid[nr][nc] is Tile.FLOOR for nr, nc in neighbours)
    # fewer than four neighbours inside the rectangle means the door is on its edge
    return touches_floor and len(neighbours) < 4


def _check_doors(features, grid, box) -> None:
    invalid = [f for f in features if f.tile is Tile.DOOR and not _is_door_legal(f, grid, box)]
    if invalid:
        _fail(IllegalDoorError(invalid, render_features(features)))


__all__ = ["Room", "MIN_FLOOR_TILES"]
