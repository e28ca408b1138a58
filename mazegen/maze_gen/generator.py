from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import math
import numpy as np
from PIL import Image

from .boundary import BoundaryFinisher
from .carver import MazeCarver, should_flip
from .codec import AXIS_LIMIT
from .endpoints import place_endpoints
from .errors import InvalidColor, InvalidDimensions, InvalidPlacement
from .locations import Location, candidate_cells, is_exact
from .pixels import PixelGrid
from .rng import RandomSource, random_seed
from ..eval_core.validator import shortest_path

# Arcade 16-colour palette; index 0 is the transparent slot
PALETTE: List[Tuple[int, int, int]] = [
    (0x00, 0x00, 0x00), (0xff, 0xff, 0xff), (0xff, 0x21, 0x21), (0xff, 0x93, 0xc4),
    (0xff, 0x81, 0x35), (0xff, 0xf6, 0x09), (0x24, 0x9c, 0xa3), (0x78, 0xdc, 0x52),
    (0x00, 0x3f, 0xad), (0x87, 0xf2, 0xff), (0x8e, 0x2e, 0xc4), (0xa4, 0x83, 0x9f),
    (0x5c, 0x40, 0x6c), (0xe5, 0xcd, 0xc4), (0x91, 0x46, 0x3d), (0x00, 0x00, 0x00),
]


def check_placement(entrance_rule: Location, exit_rule: Location) -> None:
    if entrance_rule is exit_rule and is_exact(entrance_rule):
        raise InvalidPlacement(f"entrance and exit cannot both be {entrance_rule.name}")


def check_distinct_endpoints(width: int, height: int, entrance_rule: Location, exit_rule: Location) -> None:
    # The carve starts from one rule and scores reached cells against the other.
    # If the scored rule admits one cell the start rule can also produce, the
    # two endpoints may coincide.
    if should_flip(entrance_rule, exit_rule):
        start_rule, target_rule = exit_rule, entrance_rule
    else:
        start_rule, target_rule = entrance_rule, exit_rule
    targets = candidate_cells(width, height, target_rule)
    if len(targets) == 1 and targets <= candidate_cells(width, height, start_rule):
        raise InvalidPlacement(
            f"{entrance_rule.name} and {exit_rule.name} can share cell {next(iter(targets))} "
            f"on a {width}x{height} maze"
        )


def check_dimensions(width: int, height: int) -> None:
    if width <= 2 or height <= 2:
        raise InvalidDimensions(f"maze must be larger than 2x2 pixels, got {width}x{height}")
    if math.ceil(width / 2) > AXIS_LIMIT or math.ceil(height / 2) > AXIS_LIMIT:
        limit = AXIS_LIMIT * 2
        raise InvalidDimensions(f"maze must be at most {limit}x{limit} pixels, got {width}x{height}")


def _carve(width: int, height: int, entrance_rule: Location, exit_rule: Location,
           start_color: int, end_color: int, default_color: int, rng: RandomSource):
    check_placement(entrance_rule, exit_rule)
    check_dimensions(width, height)
    check_distinct_endpoints(width, height, entrance_rule, exit_rule)
    grid = PixelGrid(width, height)
    carver = MazeCarver(grid, rng, entrance_rule, exit_rule)
    start, end = carver.carve()
    BoundaryFinisher(grid, rng, default_color).finish()
    entrance, exit_ = place_endpoints(grid, start, end, carver.flipped, entrance_rule, exit_rule,
                                      start_color, end_color, default_color)
    return grid, entrance, exit_


def create(width: int = 9, height: int = 9,
           entrance_rule=Location.Anywhere, exit_rule=Location.Anywhere,
           start_color: int = 7, end_color: int = 2, default_color: int = 1,
           seed: Optional[int] = None) -> np.ndarray:
    """Generate a maze raster of shape (height, width).

    Walls are 0, passages ``default_color``, the entrance pixel ``start_color``
    and the exit pixel ``end_color``. The same arguments and seed always give
    the same raster.
    """
    rng = RandomSource(seed)
    grid, _, _ = _carve(int(width), int(height), Location.parse(entrance_rule), Location.parse(exit_rule),
                        start_color, end_color, default_color, rng)
    return grid.to_array()


@dataclass
class MazeConfig:
    width: int = 9
    height: int = 9
    entrance: Location = Location.Anywhere
    exit: Location = Location.Anywhere
    start_color: int = 7
    end_color: int = 2
    default_color: int = 1
    seed: Optional[int] = None
    cell_px: int = 24
    transparent_walls: bool = False

    def __post_init__(self):
        self.entrance = Location.parse(self.entrance)
        self.exit = Location.parse(self.exit)
        for name in ('start_color', 'end_color', 'default_color'):
            value = getattr(self, name)
            if not 0 <= value < len(PALETTE):
                raise InvalidColor(f"{name} must be a palette index in 0..{len(PALETTE) - 1}, got {value}")
        if self.seed is None:
            self.seed = random_seed()


class MazeGenerator:
    def __init__(self, cfg: MazeConfig):
        self.cfg = cfg

    def generate(self) -> Dict:
        cfg = self.cfg
        grid, entrance, exit_ = _carve(cfg.width, cfg.height, cfg.entrance, cfg.exit,
                                       cfg.start_color, cfg.end_color, cfg.default_color,
                                       RandomSource(cfg.seed))
        rows = grid.tolist()
        return {
            'width': cfg.width,
            'height': cfg.height,
            'seed': cfg.seed,
            'entrance_rule': cfg.entrance.name,
            'exit_rule': cfg.exit.name,
            'colors': {'start': cfg.start_color, 'end': cfg.end_color, 'default': cfg.default_color},
            'grid': rows,
            'start': entrance,
            'goal': exit_,
            'shortest_path': shortest_path(rows, entrance, exit_),
        }

    def render_image(self, maze: Dict) -> Image.Image:
        cell = self.cfg.cell_px
        grid = np.array(maze['grid'], dtype=np.uint8)
        palette = np.array(PALETTE, dtype=np.uint8)
        rgb = palette[grid]
        if self.cfg.transparent_walls:
            alpha = np.where(grid == 0, 0, 255).astype(np.uint8)
            img = Image.fromarray(np.dstack([rgb, alpha]))
        else:
            img = Image.fromarray(rgb)
        # Scale every raster pixel up to a cell_px square
        return img.resize((maze['width']*cell, maze['height']*cell), resample=Image.NEAREST)


def render_text(maze: Dict) -> str:
    start, goal = tuple(maze['start']), tuple(maze['goal'])
    lines = []
    for y, row in enumerate(maze['grid']):
        chars = []
        for x, v in enumerate(row):
            if (x, y) == start:
                chars.append('S')
            elif (x, y) == goal:
                chars.append('E')
            else:
                chars.append('.' if v else '#')
        lines.append(''.join(chars))
    return '\n'.join(lines)


if __name__ == '__main__':
    cfg = MazeConfig(width=21, height=21, entrance=Location.TopLeft, exit=Location.BottomRight, seed=42)
    gen = MazeGenerator(cfg)
    maze = gen.generate()
    print(render_text(maze))
    gen.render_image(maze).save('maze_21x21.png')
