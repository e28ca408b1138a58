import pytest

from mazegen.maze_gen.codec import Cell, pack, unpack_x, unpack_y, unpack_z


def test_pack_layout():
    key = pack(3, 5, 7)
    assert key == 3 | (5 << 8) | (7 << 16)
    assert unpack_x(key) == 3
    assert unpack_y(key) == 5
    assert unpack_z(key) == 7


def test_pack_field_limits():
    key = pack(255, 255, 65535)
    assert (unpack_x(key), unpack_y(key), unpack_z(key)) == (255, 255, 65535)


@pytest.mark.parametrize('x,y,z', [(256, 0, 0), (0, 256, 0), (0, 0, 1 << 16), (-1, 0, 0), (0, -1, 0), (0, 0, -1)])
def test_pack_rejects_out_of_range(x, y, z):
    with pytest.raises(ValueError):
        pack(x, y, z)


def test_cell_key_and_pixel():
    cell = Cell(12, 40, 301)
    assert Cell.unpack(cell.pack()) == cell
    assert cell.pixel == (24, 80)
    assert Cell(1, 1).distance == 0


def test_cell_step_counts_distance():
    nxt = Cell(2, 2, 5).step(-1, 0)
    assert nxt == Cell(1, 2, 6)
