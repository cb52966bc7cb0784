import pytest

from villas import Tile
from villas.tiles import TILE_INFO


@pytest.mark.parametrize("tile, glyph, walkable", [
    (Tile.WALL, " ", False),
    (Tile.FLOOR, "-", True),
    (Tile.DOOR, "D", True),
    (Tile.STAIR, "x", True),
])
def test_tile_attributes(tile, glyph, walkable):
    assert tile.glyph == glyph
    assert tile.walkable is walkable
    assert str(tile) == glyph


def test_exactly_four_variants_all_described():
    assert len(list(Tile)) == 4
    assert set(TILE_INFO) == set(Tile)


@pytest.mark.parametrize("name, expected", [
    ("floor", Tile.FLOOR),
    ("DOOR", Tile.DOOR),
    ("  Stair ", Tile.STAIR),
    ("wall", Tile.WALL),
])
def test_from_name_is_case_insensitive(name, expected):
    assert Tile.from_name(name) is expected


def test_from_name_rejects_unknown():
    with pytest.raises(ValueError) as exc:
        Tile.from_name("lava")
    assert "lava" in str(exc.value)
    assert "floor" in str(exc.value)
