from .pixels import PixelGrid
from .rng import RandomSource

# Chance (percent) that a qualifying border run advances the jog counter
EXTEND_CHANCE = 80
# Every JOG_PERIOD-th advance swaps a straight border stub for a jog
JOG_PERIOD = 3


class BoundaryFinisher:
    """Opens the extra last column/row left over by an even raster size.

    Cells only sit on even coordinates, so an even width leaves column
    width-1 untouched (likewise row height-1). Each carved border cell gets a
    stub into that strip; where the border cell continues along the edge, a
    jog through the strip sometimes replaces the straight edge instead. The
    jog closes one edge and opens a three-pixel detour, so the passages stay
    a tree.
    """

    def __init__(self, grid: PixelGrid, rng: RandomSource, default_color: int,
                 extend_chance: float = EXTEND_CHANCE, jog_period: int = JOG_PERIOD):
        self.grid = grid
        self.rng = rng
        self.default_color = default_color
        self.extend_chance = extend_chance
        self.jog_period = jog_period
        self.flip = 0

    def _jog_due(self) -> bool:
        if self.rng.percent_chance(self.extend_chance):
            self.flip += 1
        return self.flip % self.jog_period == 0

    def _finish_right(self) -> None:
        g = self.grid
        edge, strip = g.width - 2, g.width - 1
        for y in range(0, g.height, 2):
            if not g.get_pixel(edge, y):
                continue
            if g.get_pixel(edge, y + 1) and g.get_pixel(edge, y + 2):
                if self._jog_due():
                    g.set_pixel(strip, y, self.default_color)
                    g.set_pixel(edge, y + 1, 0)
                    g.set_pixel(strip, y + 1, self.default_color)
                    g.set_pixel(strip, y + 2, self.default_color)
                    continue
            g.set_pixel(strip, y, self.default_color)

    def _finish_bottom(self) -> None:
        g = self.grid
        edge, strip = g.height - 2, g.height - 1
        for x in range(0, g.width, 2):
            if not g.get_pixel(x, edge):
                continue
            if g.get_pixel(x + 1, edge) and g.get_pixel(x + 2, edge):
                if self._jog_due():
                    g.set_pixel(x, strip, self.default_color)
                    g.set_pixel(x + 1, edge, 0)
                    g.set_pixel(x + 1, strip, self.default_color)
                    g.set_pixel(x + 2, strip, self.default_color)
                    continue
            g.set_pixel(x, strip, self.default_color)

    def finish(self) -> None:
        # the counter is shared between both passes
        if not self.grid.width & 1:
            self._finish_right()
        if not self.grid.height & 1:
            self._finish_bottom()
