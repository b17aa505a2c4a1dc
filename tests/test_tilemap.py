import pytest

from ats_game.tilemap import Tile, TileMap


def test_default_size():
    tm = TileMap()
    assert (tm.width, tm.height) == (64, 64)
    assert (tm.tile_width, tm.tile_height) == (16.0, 16.0)


def test_tile_at():
    tm = TileMap(4, 3)
    assert tm.tile_at(2, 1) == Tile(2, 1, 0)


@pytest.mark.parametrize("x, y", [(4, 0), (0, 3), (-1, 0), (0, -1)])
def test_tile_at_out_of_range(x, y):
    tm = TileMap(4, 3)
    with pytest.raises(IndexError):
        tm.tile_at(x, y)


def test_world_positions_centred():
    tm = TileMap()
    x0, y0 = tm.tile_world_position(0, 0)
    x1, y1 = tm.tile_world_position(tm.width - 1, tm.height - 1)
    assert x0 == pytest.approx(-x1)
    assert y0 == pytest.approx(-y1)


def test_world_position_spacing():
    tm = TileMap(8, 8, 10.0, 20.0)
    ax, ay = tm.tile_world_position(2, 3)
    bx, by = tm.tile_world_position(3, 4)
    assert bx - ax == pytest.approx(10.0)
    assert by - ay == pytest.approx(20.0)


def test_tiles_cover_map():
    tm = TileMap(5, 6)
    tiles = list(tm.tiles())
    assert len(tiles) == len(tm) == tm.width * tm.height
    assert len({(t.x, t.y) for t in tiles}) == len(tiles)


def test_invalid_size():
    with pytest.raises(ValueError):
        TileMap(0, 5)
    with pytest.raises(ValueError):
        TileMap(5, 5, 0.0, 1.0)