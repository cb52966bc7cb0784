"""Error taxonomy for lattice placement and room validation.

Every error carries a short machine readable ``code`` next to its human
message, and also subclasses the closest builtin so callers can keep catching
``ValueError`` / ``IndexError`` / ``TypeError``.

Nothing in the package catches or retries these; they surface synchronously
to whoever called the failing operation.
"""
from __future__ import annotations

from typing import Sequence


class VillasError(Exception):
    code = "villas_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDimensionsError(VillasError, ValueError):
    code = "invalid_dimensions"

    def __init__(self, dimension: str, value: int):
        super().__init__(f"{dimension.capitalize()} <= 0: {value}")
        self.dimension = dimension
        self.value = value


class OutOfBoundsError(VillasError, IndexError):
    code = "out_of_bounds"

    def __init__(self, row: int, col: int, bounds):
        super().__init__(f"[{row}][{col}] is invalid for an object with {bounds}")
        self.row = row
        self.col = col
        self.bounds = bounds


class InvalidTransitionError(VillasError, ValueError):
    code = "invalid_transition"

    def __init__(self, current, attempted, row: int, col: int):
        super().__init__(
            f"{current.name} at [{row}][{col}] cannot be replaced with {attempted.name}"
        )
        self.current = current
        self.attempted = attempted
        self.row = row
        self.col = col


class NullTileError(VillasError, TypeError):
    code = "null_tile"

    def __init__(self, message: str = "tile must not be None"):
        super().__init__(message)


class RoomError(VillasError, ValueError):
    """Base for every failure raised while constructing a Room.

    ``drawing`` holds the rendering of the attempted room.
    """

    code = "room_error"

    def __init__(self, message: str, drawing: str):
        super().__init__(message)
        self.drawing = drawing


class InsufficientFloorError(RoomError):
    code = "insufficient_floor"

    def __init__(self, floor_count: int, minimum: int, drawing: str):
        super().__init__(
            f"A room cannot have less than {minimum} floor tiles; got {floor_count}:\n{drawing}",
            drawing,
        )
        self.floor_count = floor_count
        self.minimum = minimum


class DisconnectedFloorError(RoomError):
    code = "disconnected_floor"

    def __init__(self, reached: int, total: int, drawing: str):
        super().__init__(
            "Rooms with non-orthogonally adjacent floors are not allowed "
            f"({reached} of {total} floor tiles reachable):\n{drawing}",
            drawing,
        )
        self.reached = reached
        self.total = total


class IllegalDoorError(RoomError):
    code = "illegal_door"

    def __init__(self, doors: Sequence, drawing: str):
        listed = ", ".join(repr(d) for d in doors)
        super().__init__(
            f"These doors are not adjacent to floors or not on the room edge: [{listed}]. Room:\n{drawing}",
            drawing,
        )
        self.doors = tuple(doors)


class OverlappingFeatureError(RoomError):
    code = "overlapping_feature"

    def __init__(self, features: Sequence, drawing: str):
        listed = ", ".join(repr(f) for f in features)
        super().__init__(f"Features share a coordinate: [{listed}]. Room:\n{drawing}", drawing)
        self.features = tuple(features)


__all__ = [
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
