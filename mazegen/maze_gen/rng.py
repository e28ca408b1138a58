from typing import Optional
import numpy as np

MAX_SEED = 0xffffff


def random_seed() -> int:
    """Fresh seed for callers that did not supply one."""
    return int(np.random.default_rng().integers(0, MAX_SEED, endpoint=True))


class RandomSource:
    """Seeded once, then consumed sequentially by a single generation."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = random_seed() if seed is None else seed
        # numpy rejects negative seeds; fold them into the unsigned 64-bit range
        self._rng = np.random.default_rng(self.seed % (1 << 64))

    def random_range(self, lo: int, hi: int) -> int:
        # inclusive on both ends
        return int(self._rng.integers(lo, hi, endpoint=True))

    def percent_chance(self, percent: float) -> bool:
        return bool(self._rng.random() * 100 < percent)
