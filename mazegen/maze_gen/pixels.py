from typing import List
import numpy as np


class PixelGrid:
    """Raster of small colour indices, indexed (x, y) like an image.

    Reads outside the raster return 0 (wall) and writes outside it are dropped,
    so neighbour probes at the border never need their own bounds checks.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width), dtype=np.uint8)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        if not self._in_bounds(x, y):
            return 0
        return int(self.data[y, x])

    def set_pixel(self, x: int, y: int, color: int) -> None:
        if self._in_bounds(x, y):
            self.data[y, x] = color

    def replace(self, old: int, new: int) -> None:
        self.data[self.data == old] = new

    def to_array(self) -> np.ndarray:
        return self.data.copy()

    def tolist(self) -> List[List[int]]:
        return self.data.tolist()
