import math
import struct

import pytest

from tilebrush.fastmath import (
    fastcosh,
    fastercosh,
    fasterexp,
    fasterpow2,
    fastersinh,
    fastertanh,
    fastexp,
    fastpow2,
    fastsinh,
    fasttanh,
)

GRID = [-7.5, -3.0, -1.25, -0.5, 0.0, 0.3, 1.0, 2.5, 6.0, 9.75]


@pytest.mark.parametrize("p", [-20.0, -5.5, -1.0, 0.0, 0.5, 3.0, 10.25, 20.0])
def test_fastpow2_close_to_pow(p):
    assert fastpow2(p) == pytest.approx(2.0 ** p, rel=1e-3)


@pytest.mark.parametrize("p", [-20.0, -5.5, -1.0, 0.0, 0.5, 3.0, 10.25, 20.0])
def test_fasterpow2_within_coarse_bound(p):
    assert fasterpow2(p) == pytest.approx(2.0 ** p, rel=0.07)


@pytest.mark.parametrize("p", GRID)
def test_fastexp_close_to_exp(p):
    assert fastexp(p) == pytest.approx(math.exp(p), rel=1e-3)


@pytest.mark.parametrize("p", GRID)
def test_fasterexp_within_coarse_bound(p):
    assert fasterexp(p) == pytest.approx(math.exp(p), rel=0.07)


@pytest.mark.parametrize("fn", [fastpow2, fasterpow2])
def test_pow2_clips_very_negative_exponents(fn):
    assert fn(-200.0) == fn(-126.0)
    assert fn(-1000.0) == fn(-126.0)
    assert fn(-126.0) > 0.0


@pytest.mark.parametrize("fn", [fastpow2, fasterpow2, fastexp, fasterexp])
def test_overflow_saturates_to_infinity(fn):
    assert fn(math.inf) == math.inf
    assert fn(1000.0) == math.inf


@pytest.mark.parametrize("fn", [fastpow2, fasterpow2, fastexp, fasterexp])
@pytest.mark.parametrize("p", GRID)
def test_results_are_single_precision(fn, p):
    value = fn(p)
    assert struct.unpack("<f", struct.pack("<f", value))[0] == value


@pytest.mark.parametrize("fn", [fastpow2, fastexp, fasterexp])
def test_monotonic_on_grid(fn):
    values = [fn(p) for p in GRID]
    assert values == sorted(values)


@pytest.mark.parametrize("fn", [fastpow2, fasterpow2, fastexp, fastsinh, fasttanh])
def test_nan_propagates(fn):
    assert math.isnan(fn(math.nan))


@pytest.mark.parametrize("p", GRID)
def test_fastsinh_close_to_sinh(p):
    assert abs(fastsinh(p) - math.sinh(p)) <= 1e-3 * math.cosh(p)


@pytest.mark.parametrize("p", GRID)
def test_fastersinh_within_coarse_bound(p):
    assert abs(fastersinh(p) - math.sinh(p)) <= 0.07 * math.cosh(p)


@pytest.mark.parametrize("fn", [fastsinh, fastersinh])
def test_sinh_is_odd(fn):
    for p in GRID:
        assert fn(-p) == -fn(p)


def test_sinh_of_zero_is_zero():
    assert fastsinh(0.0) == 0.0
    assert fastersinh(0.0) == 0.0


@pytest.mark.parametrize("p", GRID)
def test_fastcosh_close_to_cosh(p):
    assert fastcosh(p) == pytest.approx(math.cosh(p), rel=1e-3)


@pytest.mark.parametrize("p", GRID)
def test_fastercosh_within_coarse_bound(p):
    assert fastercosh(p) == pytest.approx(math.cosh(p), rel=0.07)


@pytest.mark.parametrize("fn", [fastcosh, fastercosh])
def test_cosh_is_even(fn):
    for p in GRID:
        assert fn(-p) == fn(p)


@pytest.mark.parametrize("p", GRID)
def test_fasttanh_close_to_tanh(p):
    assert fasttanh(p) == pytest.approx(math.tanh(p), abs=1e-3)


@pytest.mark.parametrize("p", GRID)
def test_fastertanh_within_coarse_bound(p):
    assert fastertanh(p) == pytest.approx(math.tanh(p), abs=0.07)


@pytest.mark.parametrize("fn", [fasttanh, fastertanh])
def test_tanh_saturates(fn):
    assert fn(50.0) == 1.0
    assert fn(-50.0) == -1.0
    for p in GRID:
        assert -1.0 <= fn(p) <= 1.0