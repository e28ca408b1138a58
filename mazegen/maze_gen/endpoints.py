from typing import Tuple

from .codec import Cell
from .carver import OPEN, VISITED
from .locations import Location, is_on_bottom, is_on_right
from .pixels import PixelGrid

Coord = Tuple[int, int]


def fold_colors(grid: PixelGrid, default_color: int) -> None:
    grid.replace(VISITED, OPEN)
    grid.replace(OPEN, default_color)


def to_pixel(grid: PixelGrid, cell: Cell, rule: Location) -> Coord:
    x, y = cell.pixel
    # even axes have an extra strip past the last cell; sit the marker on it when open
    if not grid.width & 1 and is_on_right(rule) and grid.get_pixel(x + 1, y):
        x += 1
    if not grid.height & 1 and is_on_bottom(rule) and grid.get_pixel(x, y + 1):
        y += 1
    return x, y


def place_endpoints(grid: PixelGrid, start: Cell, end: Cell, flipped: bool,
                    entrance_rule: Location, exit_rule: Location,
                    start_color: int, end_color: int, default_color: int) -> Tuple[Coord, Coord]:
    fold_colors(grid, default_color)
    if flipped:
        start, end = end, start
    entrance = to_pixel(grid, start, entrance_rule)
    exit_ = to_pixel(grid, end, exit_rule)
    grid.set_pixel(*entrance, start_color)
    grid.set_pixel(*exit_, end_color)
    return entrance, exit_
