from typing import List, Optional
import math

from .codec import Cell
from .locations import Location, is_exact, is_valid_exit, resolve_entrance
from .pixels import PixelGrid
from .rng import RandomSource

OPEN = 1
VISITED = 2

# up, right, down, left; probing rotates clockwise from a random start
DIRECTIONS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


def should_flip(entrance_rule: Location, exit_rule: Location) -> bool:
    # An exact entrance always wins; only a free entrance with a fixed exit flips
    return not is_exact(entrance_rule) and is_exact(exit_rule)


class MazeCarver:
    """Randomized depth-first carve of a spanning tree over the cell lattice.

    The stack holds packed cell keys. Each pop carves at most one new edge and
    re-pushes the current cell, so backtracking falls out of the stack order.
    While carving, the deepest cell that satisfies the exit rule is kept as the
    end cell; ties keep the cell found first.
    """

    def __init__(self, grid: PixelGrid, rng: RandomSource, entrance_rule: Location, exit_rule: Location):
        self.grid = grid
        self.rng = rng
        self.flipped = should_flip(entrance_rule, exit_rule)
        # the rule the carve starts from, and the rule reached cells are tested against
        self.start_rule = exit_rule if self.flipped else entrance_rule
        self.target_rule = entrance_rule if self.flipped else exit_rule
        self.cols = math.ceil(grid.width / 2)
        self.rows = math.ceil(grid.height / 2)
        self.stack: List[int] = []
        self.max_distance = 0
        self.start: Optional[Cell] = None
        self.end: Optional[Cell] = None

    def _fill_cells(self) -> None:
        for x in range(self.cols):
            for y in range(self.rows):
                self.grid.set_pixel(x << 1, y << 1, OPEN)

    def _in_lattice(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.cols and 0 <= cell.y < self.rows

    def _try_carve(self, current: Cell, dx: int, dy: int) -> bool:
        nxt = current.step(dx, dy)
        if not self._in_lattice(nxt):
            return False
        nx, ny = nxt.pixel
        if self.grid.get_pixel(nx, ny) != OPEN:
            return False
        cx, cy = current.pixel
        self.grid.set_pixel(nx, ny, VISITED)
        self.grid.set_pixel(cx + dx, cy + dy, VISITED)
        self.stack.append(current.pack())
        self.stack.append(nxt.pack())
        if nxt.distance > self.max_distance and is_valid_exit(nxt, self.grid.width, self.grid.height, self.target_rule):
            self.max_distance = nxt.distance
            self.end = nxt
        return True

    def carve(self):
        self._fill_cells()
        self.start = resolve_entrance(self.grid.width, self.grid.height, self.start_rule, self.rng)
        self.end = self.start
        self.max_distance = 0
        sx, sy = self.start.pixel
        self.grid.set_pixel(sx, sy, VISITED)
        self.stack = [self.start.pack()]

        while self.stack:
            current = Cell.unpack(self.stack.pop())
            direction = self.rng.random_range(0, 3)
            for _ in range(4):
                dx, dy = DIRECTIONS[direction]
                if self._try_carve(current, dx, dy):
                    break
                direction = (direction + 1) % 4
        return self.start, self.end
