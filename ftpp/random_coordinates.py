"""Deterministic pseudo-random values keyed by a seed and 2D integer coordinates."""

from __future__ import annotations

from ftpp.random_engine import MT19937


class Random2DCoordinateGenerator:
    """Maps ``(x, y)`` to a repeatable 32-bit value for a given seed."""

    def __init__(self, seed: int = 42) -> None:
        self._seed = seed

    def seed(self) -> int:
        return self._seed

    def __call__(self, x: int, y: int) -> int:
        """Return the first engine output seeded from (seed, x, y)."""
        return MT19937.from_seed_sequence((self._seed, x, y))()