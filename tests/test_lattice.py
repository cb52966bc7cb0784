import pytest

from villas import (
    Bounds,
    InvalidDimensionsError,
    InvalidTransitionError,
    Lattice,
    NullTileError,
    OutOfBoundsError,
    Tile,
    can_replace,
    door,
    floor,
    stair,
)

ALLOWED = {
    Tile.WALL: {Tile.WALL, Tile.FLOOR, Tile.DOOR, Tile.STAIR},
    Tile.FLOOR: {Tile.FLOOR, Tile.DOOR},
    Tile.DOOR: {Tile.DOOR},
    Tile.STAIR: {Tile.STAIR},
}


@pytest.mark.parametrize("width, height", [(1, 1), (5, 5), (7, 3), (1, 12)])
def test_new_lattice_is_all_walls(width, height):
    lattice = Lattice(width, height)
    assert lattice.bounds() == Bounds(width, height)
    for r in range(height):
        for c in range(width):
            assert lattice.get(r, c) is Tile.WALL
    assert list(lattice.features()) == []


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3), (3, -4), (0, 0)])
def test_non_positive_dimensions_are_rejected(width, height):
    with pytest.raises(InvalidDimensionsError) as exc:
        Lattice(width, height)
    assert exc.value.code == "invalid_dimensions"
    assert isinstance(exc.value, ValueError)


def test_width_is_reported_before_height():
    with pytest.raises(InvalidDimensionsError) as exc:
        Lattice(0, -2)
    assert exc.value.dimension == "width"
    assert str(exc.value) == "Width <= 0: 0"


@pytest.mark.parametrize("current", list(Tile))
@pytest.mark.parametrize("attempted", list(Tile))
def test_replacement_policy_table(walls5x5, current, attempted):
    walls5x5.place(current, 0, 0)
    if attempted in ALLOWED[current]:
        assert can_replace(current, attempted)
        walls5x5.place(attempted, 0, 0)
        assert walls5x5.get(0, 0) is attempted
    else:
        assert not can_replace(current, attempted)
        with pytest.raises(InvalidTransitionError) as exc:
            walls5x5.place(attempted, 0, 0)
        assert exc.value.current is current
        assert exc.value.attempted is attempted
        assert (exc.value.row, exc.value.col) == (0, 0)
        assert walls5x5.get(0, 0) is current


def test_transition_error_message_names_tiles_and_coordinates(walls5x5):
    walls5x5.place(Tile.STAIR, 2, 3)
    with pytest.raises(InvalidTransitionError) as exc:
        walls5x5.place(Tile.FLOOR, 2, 3)
    assert str(exc.value) == "STAIR at [2][3] cannot be replaced with FLOOR"


def test_place_rejects_missing_tile(walls5x5):
    with pytest.raises(NullTileError):
        walls5x5.place(None, 0, 0)
    assert walls5x5.get(0, 0) is Tile.WALL


def test_place_rejects_non_tile_values(walls5x5):
    with pytest.raises(TypeError):
        walls5x5.place("D", 0, 0)


@pytest.mark.parametrize("row, col", [(-1, -1), (6, 6), (0, 5), (5, 0), (-1, 0), (0, -1)])
def test_place_rejects_out_of_bounds(walls5x5, row, col):
    with pytest.raises(OutOfBoundsError) as exc:
        walls5x5.place(Tile.WALL, row, col)
    message = str(exc.value)
    assert str(walls5x5.bounds()) in message
    assert str(row) in message
    assert str(col) in message
    assert isinstance(exc.value, IndexError)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_get_rejects_out_of_bounds_without_wrapping(walls5x5, row, col):
    walls5x5.place(Tile.STAIR, 4, 4)
    with pytest.raises(OutOfBoundsError) as exc:
        walls5x5.get(row, col)
    assert str(walls5x5.bounds()) in str(exc.value)


def test_bounds_check_uses_rows_for_height_and_columns_for_width():
    lattice = Lattice(width=4, height=2)
    lattice.place(Tile.FLOOR, 1, 3)
    with pytest.raises(OutOfBoundsError):
        lattice.place(Tile.FLOOR, 2, 0)
    with pytest.raises(OutOfBoundsError):
        lattice.place(Tile.FLOOR, 0, 4)


def test_equality_and_hash_are_structural():
    a, b = Lattice(3, 2), Lattice(3, 2)
    assert a == b and hash(a) == hash(b)
    a.place(Tile.FLOOR, 1, 1)
    assert a != b
    b.place(Tile.FLOOR, 1, 1)
    assert a == b and hash(a) == hash(b)
    assert Lattice(3, 2) != Lattice(2, 3)


def test_rendering_is_one_line_per_row():
    lattice = Lattice(4, 3)
    lattice.place_many([floor(0, 0), floor(0, 1), door(0, 2), stair(2, 3)])
    assert str(lattice) == "--D \n    \n   x"


def test_features_lists_committed_cells_row_major():
    lattice = Lattice(3, 3)
    lattice.place_many([stair(2, 0), floor(0, 1), door(0, 2)])
    assert list(lattice.features()) == [floor(0, 1), door(0, 2), stair(2, 0)]


def test_rows_is_a_snapshot(walls5x5):
    snapshot = walls5x5.rows()
    walls5x5.place(Tile.FLOOR, 0, 0)
    assert snapshot[0][0] is Tile.WALL
    assert walls5x5.rows()[0][0] is Tile.FLOOR
