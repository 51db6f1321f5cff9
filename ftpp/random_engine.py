"""A 32-bit Mersenne Twister, a seed sequence and a uniform shuffle built on it."""

from __future__ import annotations

from typing import Iterable, MutableSequence, TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF
_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_ENGINE_RANGE = _MASK


class MT19937:
    """The MT19937 generator producing 32-bit unsigned integers."""

    MIN = 0
    MAX = _MASK
    DEFAULT_SEED = 5489

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK]
        for i in range(1, _N):
            previous = state[-1]
            state.append((1812433253 * (previous ^ (previous >> 30)) + i) & _MASK)
        self._state = state
        self._index = _N

    @classmethod
    def from_seed_sequence(cls, values: Iterable[int]) -> MT19937:
        """Create an engine whose state is generated by a seed sequence of ``values``."""
        engine = cls()
        state = seed_sequence(values, _N)
        if (state[0] & _UPPER_MASK) == 0 and not any(state[1:]):
            state[0] = _UPPER_MASK
        engine._state = state
        engine._index = _N
        return engine

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def __call__(self) -> int:
        """Return the next 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK


def _scramble(value: int) -> int:
    return value ^ (value >> 27)


def seed_sequence(values: Iterable[int], count: int) -> list[int]:
    """Spread ``values`` (each truncated to 32 bits) into ``count`` 32-bit seeds."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []
    seeds = [value & _MASK for value in values]
    s = len(seeds)
    n = count
    out = [0x8B8B8B8B] * n

    if n >= 623:
        t = 11
    elif n >= 68:
        t = 7
    elif n >= 39:
        t = 5
    elif n >= 7:
        t = 3
    else:
        t = (n - 1) // 2
    p = (n - t) // 2
    q = p + t
    m = max(s + 1, n)

    for k in range(m):
        r1 = (1664525 * _scramble(out[k % n] ^ out[(k + p) % n] ^ out[(k - 1) % n])) & _MASK
        if k == 0:
            r2 = r1 + s
        elif k <= s:
            r2 = r1 + k % n + seeds[k - 1]
        else:
            r2 = r1 + k % n
        r2 &= _MASK
        out[(k + p) % n] = (out[(k + p) % n] + r1) & _MASK
        out[(k + q) % n] = (out[(k + q) % n] + r2) & _MASK
        out[k % n] = r2

    for k in range(m, m + n):
        total = (out[k % n] + out[(k + p) % n] + out[(k - 1) % n]) & _MASK
        r3 = (1566083941 * _scramble(total)) & _MASK
        r4 = (r3 - k % n) & _MASK
        out[(k + p) % n] ^= r3
        out[(k + q) % n] ^= r4
        out[k % n] = r4

    return out


def _uniform_below(engine: MT19937, bound: int) -> int:
    """Return an integer uniformly drawn from ``range(bound)``."""
    if bound == 1 << 32:
        return engine()
    if not 0 < bound < 1 << 32:
        raise ValueError("bound out of range for a 32-bit engine")
    product = engine() * bound
    low = product & _MASK
    if low < bound:
        threshold = ((1 << 32) - bound) % bound
        while low < threshold:
            product = engine() * bound
            low = product & _MASK
    return product >> 32


def _swap(items: MutableSequence[T], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def shuffle(items: MutableSequence[T], engine: MT19937) -> None:
    """Permute ``items`` in place, drawing swap positions from ``engine``.

    Small sequences draw two swap positions from a single random number.
    """
    size = len(items)
    if size == 0:
        return
    if _ENGINE_RANGE // size >= size:
        position = 1
        if size % 2 == 0:
            _swap(items, position, _uniform_below(engine, 2))
            position += 1
        while position != size:
            swap_range = position + 1
            drawn = _uniform_below(engine, swap_range * (swap_range + 1))
            first, second = divmod(drawn, swap_range + 1)
            _swap(items, position, first)
            _swap(items, position + 1, second)
            position += 2
        return
    for position in range(1, size):
        _swap(items, position, _uniform_below(engine, position + 1))