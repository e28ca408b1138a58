from enum import Enum
from typing import FrozenSet, Set, Tuple
import math

from .codec import Cell
from .rng import RandomSource


class Location(Enum):
    Anywhere = 0
    TopLeft = 1 << 0
    TopRight = 1 << 1
    BottomLeft = 1 << 2
    BottomRight = 1 << 3
    LeftSide = 1 << 4
    TopSide = 1 << 5
    RightSide = 1 << 6
    BottomSide = 1 << 7
    Center = 1 << 8

    @classmethod
    def parse(cls, value) -> 'Location':
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = str(value).replace('_', '').replace('-', '').replace(' ', '').lower()
        for loc in cls:
            if loc.name.lower() == key:
                return loc
        names = ', '.join(loc.name for loc in cls)
        raise ValueError(f"unknown location {value!r}; expected one of: {names}")


CORNERS: FrozenSet[Location] = frozenset({
    Location.TopLeft, Location.TopRight, Location.BottomLeft, Location.BottomRight,
})
SIDES: FrozenSet[Location] = frozenset({
    Location.LeftSide, Location.TopSide, Location.RightSide, Location.BottomSide,
})
RIGHT: FrozenSet[Location] = frozenset({Location.TopRight, Location.BottomRight, Location.RightSide})
BOTTOM: FrozenSet[Location] = frozenset({Location.BottomLeft, Location.BottomRight, Location.BottomSide})


def is_corner(rule: Location) -> bool:
    return rule in CORNERS


def is_side(rule: Location) -> bool:
    return rule in SIDES


def is_exact(rule: Location) -> bool:
    """Corner or center: the rule names exactly one cell."""
    return rule in CORNERS or rule is Location.Center


def is_on_right(rule: Location) -> bool:
    return rule in RIGHT


def is_on_bottom(rule: Location) -> bool:
    return rule in BOTTOM


def max_cells(width: int, height: int) -> Tuple[int, int]:
    return math.ceil(width / 2) - 1, math.ceil(height / 2) - 1


def resolve_entrance(width: int, height: int, rule: Location, rng: RandomSource) -> Cell:
    max_x, max_y = max_cells(width, height)
    # both draws happen for every rule so the stream does not depend on the rule
    rand_x = rng.random_range(0, max_x)
    rand_y = rng.random_range(0, max_y)
    table = {
        Location.Anywhere: (rand_x, rand_y),
        Location.TopLeft: (0, 0),
        Location.TopRight: (max_x, 0),
        Location.BottomLeft: (0, max_y),
        Location.BottomRight: (max_x, max_y),
        Location.LeftSide: (0, rand_y),
        Location.TopSide: (rand_x, 0),
        Location.RightSide: (max_x, rand_y),
        Location.BottomSide: (rand_x, max_y),
        Location.Center: (max_x >> 1, max_y >> 1),
    }
    x, y = table[rule]
    return Cell(x, y, 0)


def is_valid_exit(cell: Cell, width: int, height: int, rule: Location) -> bool:
    max_x, max_y = max_cells(width, height)
    x, y = cell.x, cell.y
    if rule is Location.Anywhere:
        return True
    if rule is Location.TopLeft:
        return x == 0 and y == 0
    if rule is Location.TopRight:
        return x == max_x and y == 0
    if rule is Location.BottomLeft:
        return x == 0 and y == max_y
    if rule is Location.BottomRight:
        return x == max_x and y == max_y
    if rule is Location.LeftSide:
        return x == 0
    if rule is Location.TopSide:
        return y == 0
    if rule is Location.RightSide:
        return x == max_x
    if rule is Location.BottomSide:
        return y == max_y
    if rule is Location.Center:
        return x == max_x >> 1 and y == max_y >> 1
    return False


def candidate_cells(width: int, height: int, rule: Location) -> Set[Tuple[int, int]]:
    max_x, max_y = max_cells(width, height)
    return {
        (x, y)
        for x in range(max_x + 1)
        for y in range(max_y + 1)
        if is_valid_exit(Cell(x, y), width, height, rule)
    }
