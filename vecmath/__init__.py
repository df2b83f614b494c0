"""2D vector math with a fast inverse square root."""

from .math import DOWN, LEFT, RIGHT, UP, ZERO, Vec2d, exact_inverse_sqrt, fast_inverse_sqrt

__all__ = [
    "DOWN",
    "LEFT",
    "RIGHT",
    "UP",
    "Vec2d",
    "ZERO",
    "exact_inverse_sqrt",
    "fast_inverse_sqrt",
]
