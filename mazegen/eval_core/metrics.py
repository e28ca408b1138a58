from typing import Dict
import numpy as np


class Metrics:
    def __init__(self, digits: int = 3):
        self.digits = digits

    def score(self, grid, result: Dict) -> Dict:
        g = np.asarray(grid) != 0
        h, w = g.shape
        padded = np.pad(g, 1)
        # open 4-neighbours of every pixel
        degree = (padded[:-2, 1:-1].astype(int) + padded[2:, 1:-1] + padded[1:-1, :-2] + padded[1:-1, 2:])
        degree = np.where(g, degree, 0)
        open_px = int(g.sum())
        path = result.get('shortest_path') or []
        # straight runs: path pixels whose step in equals the step out
        turns = 0
        for i in range(1, len(path)-1):
            (x0, y0), (x1, y1), (x2, y2) = path[i-1], path[i], path[i+1]
            if (x1-x0, y1-y0) != (x2-x1, y2-y1):
                turns += 1
        inner = max(1, len(path)-2)
        return {
            'ok': bool(result.get('ok')),
            'solution_length': len(path),
            'dead_ends': int(np.count_nonzero(g & (degree == 1))),
            'junctions': int(np.count_nonzero(g & (degree >= 3))),
            'open_ratio': round(open_px / (h*w), self.digits) if h*w else 0.0,
            'straightness': round(1 - turns / inner, self.digits) if len(path) > 2 else 1.0,
        }
