"""Single-precision (float32) helpers with IEEE-754 semantics."""

from __future__ import annotations

import numpy as np

_U32_MASK = 0xFFFFFFFF


def to_f32(value: float) -> np.float32:
    """Round a value to the nearest float32 (overflow becomes +/-inf)."""
    with np.errstate(all="ignore"):
        return np.float32(value)


def f32_to_bits(value: float) -> int:
    """Return the raw IEEE-754 bit pattern of ``value`` as an unsigned int."""
    return int(to_f32(value).view(np.uint32))


def f32_from_bits(bits: int) -> np.float32:
    """Reinterpret a 32-bit pattern as a float32 (bits are taken modulo 2**32)."""
    return np.uint32(bits & _U32_MASK).view(np.float32)


def f32_div(numerator: float, denominator: float) -> np.float32:
    """Divide in float32; division by zero yields inf or NaN instead of raising."""
    with np.errstate(all="ignore"):
        return np.float32(numerator) / np.float32(denominator)


def f32_sqrt(value: float) -> np.float32:
    """Precise float32 square root; negative input yields NaN."""
    with np.errstate(all="ignore"):
        return np.sqrt(np.float32(value))
