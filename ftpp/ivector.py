"""Two- and three-component vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


def _div(a: Any, b: Any) -> Any:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b > 0) else -quotient
    return a / b


@dataclass
class IVector2:
    """A 2D vector; arithmetic operators work component by component."""

    x: Any = 0
    y: Any = 0

    def __add__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: IVector2) -> IVector2:
        if not isinstance(other, IVector2):
            return NotImplemented
        return IVector2(_div(self.x, other.x), _div(self.y, other.y))

    def length(self) -> float:
        return math.hypot(float(self.x), float(self.y))

    def normalize(self) -> IVector2:
        """Return a unit-length float vector, or the zero vector for zero length."""
        size = self.length()
        if size == 0.0:
            return IVector2(0.0, 0.0)
        return IVector2(float(self.x) / size, float(self.y) / size)

    def dot(self, other: IVector2) -> float:
        return float(self.x) * float(other.x) + float(self.y) * float(other.y)

    def cross(self) -> IVector2:
        """Return the perpendicular vector (-y, x)."""
        return IVector2(-self.y, self.x)


@dataclass
class IVector3:
    """A 3D vector; arithmetic operators work component by component."""

    x: Any = 0
    y: Any = 0
    z: Any = 0

    def __add__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: IVector3) -> IVector3:
        if not isinstance(other, IVector3):
            return NotImplemented
        return IVector3(
            _div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z)
        )

    def length(self) -> float:
        return math.sqrt(
            float(self.x) ** 2 + float(self.y) ** 2 + float(self.z) ** 2
        )

    def normalize(self) -> IVector3:
        """Return a unit-length float vector, or the zero vector for zero length."""
        size = self.length()
        if size == 0.0:
            return IVector3(0.0, 0.0, 0.0)
        return IVector3(float(self.x) / size, float(self.y) / size, float(self.z) / size)

    def dot(self, other: IVector3) -> float:
        return (
            float(self.x) * float(other.x)
            + float(self.y) * float(other.y)
            + float(self.z) * float(other.z)
        )

    def cross(self, other: IVector3) -> IVector3:
        return IVector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )