"""
project: Dwarven Villas
module: __init__.py
License: MIT

Building-interior tile lattice and room validation.

Public surface:
    from villas import Lattice, Room, Tile, Feature, floor, door, stair, wall
"""

from .errors import (
    DisconnectedFloorError,
    IllegalDoorError,
    InsufficientFloorError,
    InvalidDimensionsError,
    InvalidTransitionError,
    NullTileError,
    OutOfBoundsError,
    OverlappingFeatureError,
    RoomError,
    VillasError,
)  # noqa: F401
from .features import Feature, door, floor, stair, wall  # noqa: F401
from .lattice import Bounds, Lattice, can_replace  # noqa: F401
from .render import render_features, render_rows  # noqa: F401
from .room import MIN_FLOOR_TILES, Room  # noqa: F401
from .tiles import DOOR, FLOOR, STAIR, WALL, Tile  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "Lattice",
    "can_replace",
    "Room",
    "MIN_FLOOR_TILES",
    "Tile",
    "WALL",
    "FLOOR",
    "DOOR",
    "STAIR",
    "Feature",
    "floor",
    "door",
    "stair",
    "wall",
    "render_rows",
    "render_features",
    "VillasError",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "InvalidTransitionError",
    "NullTileError",
    "RoomError",
    "InsufficientFloorError",
    "DisconnectedFloorError",
    "IllegalDoorError",
    "OverlappingFeatureError",
]
