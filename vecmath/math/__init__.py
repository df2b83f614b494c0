"""Single-precision vector math and the fast inverse square root."""

from .f32 import f32_div, f32_from_bits, f32_sqrt, f32_to_bits, to_f32
from .fisr import MAGIC_CONSTANT, exact_inverse_sqrt, fast_inverse_sqrt
from .vec2d import DOWN, LEFT, NORMALIZE_EPSILON, RIGHT, UP, ZERO, Vec2d

__all__ = [
    "DOWN",
    "LEFT",
    "MAGIC_CONSTANT",
    "NORMALIZE_EPSILON",
    "RIGHT",
    "UP",
    "Vec2d",
    "ZERO",
    "exact_inverse_sqrt",
    "f32_div",
    "f32_from_bits",
    "f32_sqrt",
    "f32_to_bits",
    "fast_inverse_sqrt",
    "to_f32",
]
