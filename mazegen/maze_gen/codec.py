from typing import NamedTuple

# Field widths of the packed key: x and y take 8 bits each, distance 16 bits
AXIS_LIMIT = 1 << 8
DISTANCE_LIMIT = 1 << 16


def pack(x: int, y: int, z: int) -> int:
    if not (0 <= x < AXIS_LIMIT and 0 <= y < AXIS_LIMIT):
        raise ValueError(f"cell ({x}, {y}) outside packable range 0..{AXIS_LIMIT - 1}")
    if not 0 <= z < DISTANCE_LIMIT:
        raise ValueError(f"distance {z} outside packable range 0..{DISTANCE_LIMIT - 1}")
    return x | (y << 8) | (z << 16)


def unpack_x(key: int) -> int:
    return key & 0xff


def unpack_y(key: int) -> int:
    return (key >> 8) & 0xff


def unpack_z(key: int) -> int:
    return key >> 16


class Cell(NamedTuple):
    x: int
    y: int
    distance: int = 0

    def pack(self) -> int:
        return pack(self.x, self.y, self.distance)

    @classmethod
    def unpack(cls, key: int) -> 'Cell':
        return cls(unpack_x(key), unpack_y(key), unpack_z(key))

    def step(self, dx: int, dy: int) -> 'Cell':
        return Cell(self.x + dx, self.y + dy, self.distance + 1)

    @property
    def pixel(self):
        # cells live on even raster coordinates
        return self.x << 1, self.y << 1
