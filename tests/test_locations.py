import pytest

from mazegen.maze_gen.codec import Cell
from mazegen.maze_gen.locations import (
    Location, candidate_cells, is_corner, is_exact, is_on_bottom, is_on_right, is_side,
    is_valid_exit, max_cells, resolve_entrance,
)
from mazegen.maze_gen.rng import RandomSource


def test_max_cells():
    assert max_cells(9, 9) == (4, 4)
    assert max_cells(10, 9) == (4, 4)
    assert max_cells(3, 4) == (1, 1)
    assert max_cells(11, 6) == (5, 2)


@pytest.mark.parametrize('rule,expected', [
    (Location.TopLeft, (0, 0)),
    (Location.TopRight, (5, 0)),
    (Location.BottomLeft, (0, 3)),
    (Location.BottomRight, (5, 3)),
    (Location.Center, (2, 1)),
])
def test_exact_entrances(rule, expected):
    # 11x8 raster -> cells 0..5 by 0..3
    cell = resolve_entrance(11, 8, rule, RandomSource(1))
    assert (cell.x, cell.y) == expected
    assert cell.distance == 0


def test_side_entrances_stay_on_their_side():
    for seed in range(50):
        rng = RandomSource(seed)
        left = resolve_entrance(11, 9, Location.LeftSide, rng)
        top = resolve_entrance(11, 9, Location.TopSide, rng)
        right = resolve_entrance(11, 9, Location.RightSide, rng)
        bottom = resolve_entrance(11, 9, Location.BottomSide, rng)
        anywhere = resolve_entrance(11, 9, Location.Anywhere, rng)
        assert left.x == 0 and 0 <= left.y <= 4
        assert top.y == 0 and 0 <= top.x <= 5
        assert right.x == 5 and 0 <= right.y <= 4
        assert bottom.y == 4 and 0 <= bottom.x <= 5
        assert 0 <= anywhere.x <= 5 and 0 <= anywhere.y <= 4


def test_every_rule_consumes_the_same_draws():
    a, b = RandomSource(5), RandomSource(5)
    resolve_entrance(9, 9, Location.TopLeft, a)
    resolve_entrance(9, 9, Location.Anywhere, b)
    assert a.random_range(0, 1000) == b.random_range(0, 1000)


def test_valid_exit_rules():
    w, h = 9, 9
    assert is_valid_exit(Cell(3, 2), w, h, Location.Anywhere)
    assert is_valid_exit(Cell(0, 0), w, h, Location.TopLeft)
    assert not is_valid_exit(Cell(0, 1), w, h, Location.TopLeft)
    assert is_valid_exit(Cell(4, 0), w, h, Location.TopRight)
    assert is_valid_exit(Cell(0, 4), w, h, Location.BottomLeft)
    assert is_valid_exit(Cell(4, 4), w, h, Location.BottomRight)
    assert is_valid_exit(Cell(0, 3), w, h, Location.LeftSide)
    assert not is_valid_exit(Cell(1, 3), w, h, Location.LeftSide)
    assert is_valid_exit(Cell(2, 0), w, h, Location.TopSide)
    assert is_valid_exit(Cell(4, 1), w, h, Location.RightSide)
    assert is_valid_exit(Cell(1, 4), w, h, Location.BottomSide)
    assert is_valid_exit(Cell(2, 2), w, h, Location.Center)
    assert not is_valid_exit(Cell(2, 3), w, h, Location.Center)


def test_classification():
    exact = {loc for loc in Location if is_exact(loc)}
    assert exact == {Location.TopLeft, Location.TopRight, Location.BottomLeft,
                     Location.BottomRight, Location.Center}
    assert {loc for loc in Location if is_on_right(loc)} == {
        Location.TopRight, Location.BottomRight, Location.RightSide}
    assert {loc for loc in Location if is_on_bottom(loc)} == {
        Location.BottomLeft, Location.BottomRight, Location.BottomSide}
    assert is_corner(Location.BottomLeft) and not is_corner(Location.Center)
    assert is_side(Location.TopSide) and not is_side(Location.Anywhere)


@pytest.mark.parametrize('text', ['TopLeft', 'top_left', 'top-left', 'Top Left', 'TOPLEFT', 1])
def test_parse(text):
    assert Location.parse(text) is Location.TopLeft


def test_parse_unknown():
    with pytest.raises(ValueError, match='unknown location'):
        Location.parse('middle')


def test_candidate_cells():
    assert candidate_cells(9, 9, Location.LeftSide) == {(0, y) for y in range(5)}
    assert candidate_cells(9, 9, Location.Center) == {(2, 2)}
    assert len(candidate_cells(9, 9, Location.Anywhere)) == 25
