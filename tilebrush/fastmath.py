"""Fast single-precision approximations of exp, pow2 and the hyperbolic functions.

The arithmetic is carried out in IEEE-754 single precision: every
intermediate value is rounded to float32, and the results are built by
writing an integer into the bit pattern of a float. The "fast" variants
are accurate to roughly 1e-4 relative error. The "faster" variants trade
accuracy, to a few percent, for fewer operations.

Inputs below -126 are clipped, so very negative exponents underflow to
the smallest normal float rather than to zero. Exponents too large for
single precision saturate to infinity.
"""

from __future__ import annotations

import math
import struct

__all__ = [
    "fastpow2",
    "fastexp",
    "fasterpow2",
    "fasterexp",
    "fastsinh",
    "fastersinh",
    "fastcosh",
    "fastercosh",
    "fasttanh",
    "fastertanh",
]

_FLOAT = struct.Struct("<f")
_UINT = struct.Struct("<I")
_INF_BITS = 0x7F800000


def _f32(x: float) -> float:
    """Round ``x`` to the nearest single-precision value."""
    try:
        return _FLOAT.unpack(_FLOAT.pack(x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _bits_to_float(value: float) -> float:
    """Reinterpret ``value``, truncated to an unsigned integer, as float32 bits.

    Values that would not fit a finite float pattern saturate: negative
    ones give 0.0 and overly large ones give infinity.
    """
    if math.isnan(value):
        return math.nan
    if value <= 0:
        return 0.0
    if value >= _INF_BITS:
        return math.inf
    return _FLOAT.unpack(_UINT.pack(int(value)))[0]


_TWO_23 = float(1 << 23)
_LOG2_E = _f32(1.442695040)
_C_121 = _f32(121.2740575)
_C_27 = _f32(27.7280233)
_C_4 = _f32(4.84252568)
_C_1 = _f32(1.49012907)
_C_126 = _f32(126.94269504)


def fastpow2(p: float) -> float:
    """Approximate 2 ** p."""
    p = _f32(p)
    if math.isnan(p):
        return math.nan
    if p == math.inf:
        return math.inf
    offset = 1.0 if p < 0 else 0.0
    clipp = -126.0 if p < -126 else p
    w = int(clipp)
    z = _f32(_f32(clipp - w) + offset)
    acc = _f32(clipp + _C_121)
    acc = _f32(acc + _f32(_C_27 / _f32(_C_4 - z)))
    acc = _f32(acc - _f32(_C_1 * z))
    return _bits_to_float(_f32(_TWO_23 * acc))


def fastexp(p: float) -> float:
    """Approximate e ** p."""
    return fastpow2(_f32(_LOG2_E * _f32(p)))


def fasterpow2(p: float) -> float:
    """Approximate 2 ** p, coarsely."""
    p = _f32(p)
    if math.isnan(p):
        return math.nan
    if p == math.inf:
        return math.inf
    clipp = -126.0 if p < -126 else p
    return _bits_to_float(_f32(_TWO_23 * _f32(clipp + _C_126)))


def fasterexp(p: float) -> float:
    """Approximate e ** p, coarsely."""
    return fasterpow2(_f32(_LOG2_E * _f32(p)))


def fastsinh(p: float) -> float:
    """Approximate sinh(p)."""
    return _f32(0.5 * _f32(fastexp(p) - fastexp(-p)))


def fastersinh(p: float) -> float:
    """Approximate sinh(p), coarsely."""
    return _f32(0.5 * _f32(fasterexp(p) - fasterexp(-p)))


def fastcosh(p: float) -> float:
    """Approximate cosh(p)."""
    return _f32(0.5 * _f32(fastexp(p) + fastexp(-p)))


def fastercosh(p: float) -> float:
    """Approximate cosh(p), coarsely."""
    return _f32(0.5 * _f32(fasterexp(p) + fasterexp(-p)))


def _tanh_from(exp_neg_2p: float) -> float:
    return _f32(-1.0 + _f32(2.0 / _f32(1.0 + exp_neg_2p)))


def fasttanh(p: float) -> float:
    """Approximate tanh(p)."""
    return _tanh_from(fastexp(_f32(-2.0 * _f32(p))))


def fastertanh(p: float) -> float:
    """Approximate tanh(p), coarsely."""
    return _tanh_from(fasterexp(_f32(-2.0 * _f32(p))))