# MIT License (see LICENSE)
"""
Immutable 2D vector value type.

Every operation returns a new Vec2; nothing mutates its receiver or its
argument, so vectors can be shared freely between bodies, trails and
renderers without aliasing hazards.

Division by a scalar uses plain float division and therefore raises
ZeroDivisionError for a zero divisor. Call sites that can legitimately see
a zero length guard before dividing (see normalized()).
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vec2:
    """
    2D vector with real components.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0.0, 0.0)

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> Vec2:
        """Vector of the given length pointing along `angle` (radians from +x)."""
        return Vec2(math.cos(angle) * length, math.sin(angle) * length)

    # Arithmetic ---------------------------------------------------------------

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> Vec2:
        return Vec2(self.x * s, self.y * s)

    def div(self, s: float) -> Vec2:
        """Divide both components by `s`. Raises ZeroDivisionError if s == 0."""
        return Vec2(self.x / s, self.y / s)

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __mul__(self, s: float) -> Vec2:
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vec2:
        return self.div(s)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    # Metrics ------------------------------------------------------------------

    def length_sq(self) -> float:
        """Squared length. Avoids the sqrt in the pairwise gravity loop."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vec2:
        """
        Unit vector in the same direction.

        A zero-length vector has no heading, so the zero vector is returned
        instead of dividing by zero.
        """
        n = self.length()
        if n == 0.0:
            return Vec2.zero()
        return self.div(n)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vec2) -> float:
        return self.sub(other).length()

    def angle(self) -> float:
        """Heading in radians via atan2, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def rotate(self, angle: float) -> Vec2:
        """Apply the standard 2D rotation matrix for `angle` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    # Interop ------------------------------------------------------------------

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        """Copy as a float64 numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def of(v) -> Vec2:
        """Coerce a Vec2, tuple, list or numpy array of two numbers to Vec2."""
        if isinstance(v, Vec2):
            return v
        return Vec2(float(v[0]), float(v[1]))


def stack(points) -> np.ndarray:
    """
    Stack a sequence of Vec2 into a float64 array of shape (N, 2).

    Used by renderers that want a trail as one array.
    """
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)
