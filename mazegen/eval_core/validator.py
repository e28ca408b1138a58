from collections import deque
from typing import Any, Dict, List, Optional, Tuple
import numpy as np

Coord = Tuple[int, int]

STEPS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def _open_neighbors(grid: np.ndarray, x: int, y: int):
    h, w = grid.shape
    for dx, dy in STEPS:
        nx, ny = x+dx, y+dy
        if 0 <= nx < w and 0 <= ny < h and grid[ny, nx] != 0:
            yield (nx, ny)


def bfs_distances(grid, start: Coord) -> Dict[Coord, int]:
    """Step count from start to every open pixel reachable from it."""
    grid = np.asarray(grid)
    start = tuple(start)
    dist = {start: 0}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nxt in _open_neighbors(grid, x, y):
            if nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                q.append(nxt)
    return dist


def shortest_path(grid, start: Coord, goal: Coord) -> List[Coord]:
    grid = np.asarray(grid)
    start, goal = tuple(start), tuple(goal)
    q = deque([start])
    prev: Dict[Coord, Optional[Coord]] = {start: None}
    while q:
        x, y = q.popleft()
        if (x, y) == goal:
            break
        for nxt in _open_neighbors(grid, x, y):
            if nxt not in prev:
                prev[nxt] = (x, y)
                q.append(nxt)
    if goal not in prev:
        return []
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    return list(reversed(path))


class Validator:
    """Checks a finished raster: palette, endpoints and the perfect-maze property.

    The open pixels must form a tree under 4-adjacency: one connected piece
    with exactly one fewer adjacency than pixels.
    """

    def __init__(self, grid, start: Coord, goal: Coord, colors: Dict[str, int]):
        self.grid = np.array(grid, dtype=np.int64)
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.colors = colors

    def validate(self) -> Dict[str, Any]:
        open_pixels = int(np.count_nonzero(self.grid))
        edges = self._count_edges()
        res: Dict[str, Any] = {'ok': False, 'open_pixels': open_pixels, 'edges': edges, 'shortest_path': []}
        err = self._check_palette() or self._check_endpoints()
        if err:
            res['error'] = err
            return res
        reached = bfs_distances(self.grid, self.start)
        if len(reached) != open_pixels:
            res['error'] = 'disconnected'
            return res
        if edges != open_pixels - 1:
            res['error'] = 'cycle'
            return res
        res['ok'] = True
        res['shortest_path'] = shortest_path(self.grid, self.start, self.goal)
        return res

    def _count_edges(self) -> int:
        g = self.grid != 0
        return int(np.count_nonzero(g[:, 1:] & g[:, :-1]) + np.count_nonzero(g[1:, :] & g[:-1, :]))

    def _check_palette(self) -> str:
        allowed = {0, self.colors['start'], self.colors['end'], self.colors['default']}
        found = set(np.unique(self.grid).tolist())
        if not found <= allowed:
            return 'bad_colors'
        return ''

    def _check_endpoints(self) -> str:
        if self.start == self.goal:
            return 'same_endpoints'
        sx, sy = self.start
        gx, gy = self.goal
        if self.grid[sy, sx] != self.colors['start']:
            return 'bad_start'
        if self.grid[gy, gx] != self.colors['end']:
            return 'bad_goal'
        return ''
