"""Two-dimensional gradient (Perlin) noise with a fixed permutation table."""

from __future__ import annotations

import math

from ftpp.random_engine import MT19937, shuffle

_SEED = 42


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _grad2(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 3
    u = x if (h & 2) == 0 else -x
    v = y if (h & 1) == 0 else -y
    return u + v


class PerlinNoise2D:
    """Deterministic 2D noise; the lattice repeats every 256 units."""

    def __init__(self) -> None:
        table = list(range(256))
        shuffle(table, MT19937(_SEED))
        self._permutation = table + table

    def sample(self, x: float, y: float) -> float:
        """Return the noise value at ``(x, y)``; it is zero on integer lattice points."""
        perm = self._permutation
        floor_x = math.floor(x)
        floor_y = math.floor(y)
        xi = floor_x & 255
        yi = floor_y & 255
        xf = x - floor_x
        yf = y - floor_y

        aa = perm[perm[xi] + yi]
        ab = perm[perm[xi] + yi + 1]
        ba = perm[perm[xi + 1] + yi]
        bb = perm[perm[xi + 1] + yi + 1]

        u = _fade(xf)
        v = _fade(yf)

        x1 = _grad2(aa, xf, yf)
        x2 = _grad2(ba, xf - 1, yf)
        y1 = x1 + u * (x2 - x1)

        x3 = _grad2(ab, xf, yf - 1)
        x4 = _grad2(bb, xf - 1, yf - 1)
        y2 = x3 + u * (x4 - x3)

        return y1 + v * (y2 - y1)