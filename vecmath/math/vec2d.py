"""2D vector value type in single precision."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from .f32 import f32_div, f32_sqrt, to_f32
from .fisr import fast_inverse_sqrt

# Vectors whose |x| + |y| falls below this are returned unchanged by normalized().
NORMALIZE_EPSILON = np.float32(1e-9)


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


@dataclass(frozen=True, eq=False)
class Vec2d:
    """Immutable 2D vector with float32 components."""

    x: np.float32
    y: np.float32

    UP: ClassVar["Vec2d"]
    DOWN: ClassVar["Vec2d"]
    RIGHT: ClassVar["Vec2d"]
    LEFT: ClassVar["Vec2d"]
    ZERO: ClassVar["Vec2d"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_f32(self.x))
        object.__setattr__(self, "y", to_f32(self.y))

    def __add__(self, other: "Vec2d") -> "Vec2d":
        if not isinstance(other, Vec2d):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2d") -> "Vec2d":
        if not isinstance(other, Vec2d):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vec2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2d":
        if not _is_scalar(scalar):
            return NotImplemented
        scalar = to_f32(scalar)
        with np.errstate(all="ignore"):
            return Vec2d(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2d":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vec2d":
        if not _is_scalar(scalar):
            return NotImplemented
        return Vec2d(f32_div(self.x, scalar), f32_div(self.y, scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)

    def __hash__(self) -> int:
        return hash((float(self.x), float(self.y)))

    def __str__(self) -> str:
        return f"({self.x!s}, {self.y!s})"

    # Named forms of the operators.
    def add(self, other: "Vec2d") -> "Vec2d":
        return self + other

    def sub(self, other: "Vec2d") -> "Vec2d":
        return self - other

    def scale(self, scalar: float) -> "Vec2d":
        return self * scalar

    def inv_scale(self, scalar: float) -> "Vec2d":
        """Divide both components by ``scalar``; zero gives inf/NaN components."""
        return self / scalar

    def dot(self, other: "Vec2d") -> np.float32:
        with np.errstate(all="ignore"):
            return self.x * other.x + self.y * other.y

    def mag(self) -> np.float32:
        """Exact magnitude. Slower than mag_sqr() because of the square root."""
        return f32_sqrt(self.mag_sqr())

    def mag_sqr(self) -> np.float32:
        with np.errstate(all="ignore"):
            return self.x * self.x + self.y * self.y

    def normalized(self) -> "Vec2d":
        """Approximately unit-length copy of the vector.

        Uses the fast inverse square root, so the result carries its error.
        A vector very close to ``(0, 0)`` is returned as is.
        """
        with np.errstate(all="ignore"):
            if abs(self.x) + abs(self.y) < NORMALIZE_EPSILON:
                return self
        return self * fast_inverse_sqrt(self.mag_sqr())


UP = Vec2d(0.0, 1.0)
DOWN = Vec2d(0.0, -1.0)
RIGHT = Vec2d(1.0, 0.0)
LEFT = Vec2d(-1.0, 0.0)
ZERO = Vec2d(0.0, 0.0)

Vec2d.UP = UP
Vec2d.DOWN = DOWN
Vec2d.RIGHT = RIGHT
Vec2d.LEFT = LEFT
Vec2d.ZERO = ZERO
