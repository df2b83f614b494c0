"""Fast inverse square root in single precision.

The bit-level approximation popularised by Quake III Arena: the float's
bit pattern is shifted and subtracted from a magic constant, then refined
with a single Newton-Raphson step. Results are approximate by design.

See https://en.wikipedia.org/wiki/Fast_inverse_square_root
"""

from __future__ import annotations

import numpy as np

from .f32 import f32_div, f32_from_bits, f32_sqrt, f32_to_bits, to_f32

MAGIC_CONSTANT = 0x5F3759DF

_HALF = np.float32(0.5)
_THREE_HALFS = np.float32(1.5)
_ONE = np.float32(1.0)


def fast_inverse_sqrt(number: float) -> np.float32:
    """Approximate ``1 / sqrt(number)`` with one refinement step.

    Intended for positive, finite, normal inputs. Zero, negative, infinite
    and NaN inputs are not rejected; they go through the same bit hack and
    produce a meaningless but well-defined value.
    """
    number = to_f32(number)
    with np.errstate(all="ignore"):
        x2 = number * _HALF
        i = f32_to_bits(number)
        i = MAGIC_CONSTANT - (i >> 1)
        y = f32_from_bits(i)
        y = y * (_THREE_HALFS - (x2 * y * y))  # 1st iteration
    return y


def exact_inverse_sqrt(number: float) -> np.float32:
    """Reference ``1 / sqrt(number)`` computed with a precise square root."""
    return f32_div(_ONE, f32_sqrt(number))
