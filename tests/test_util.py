"""Unit tests for the float comparison and formatting helpers."""

import math
import pytest

from smg.dual.float_util import DELTA, FloatUtil
from smg.dual.ring_util import RingUtil
from smg.dual.string_util import StringUtil


class TestFloatUtil:

    @pytest.mark.parametrize("a, b, expected", [
        (1.0, 1.0, True),
        (1.0, 1.0 + DELTA / 2, True),
        (1.0, 1.0 + 10 * DELTA, False),
        (math.inf, math.inf, True),
        (math.inf, -math.inf, False),
        (math.nan, math.nan, True),
        (math.nan, 0.0, False),
    ])
    def test_equals(self, a, b, expected):
        assert FloatUtil.equals(a, b) == expected

    def test_equals_with_tolerance(self):
        assert FloatUtil.equals(1.0, 1.05, tolerance=0.1)
        assert not FloatUtil.equals(1.0, 1.05, tolerance=0.01)

    def test_is_zero(self):
        assert FloatUtil.is_zero(1e-10)
        assert not FloatUtil.is_zero(1e-6)


class TestStringUtil:

    @pytest.mark.parametrize("v, expected", [
        (0.0, "0"),
        (1.0, "1"),
        (-2.5, "-2.5"),
        (123456.0, "123456"),
        (1e6, "1e+06"),
        (1234567.0, "1.234567e+06"),
        (1e21, "1e+21"),
        (0.0001, "0.0001"),
        (1e-5, "1e-05"),
        (2.5e-5, "2.5e-05"),
        (0.1 + 0.2, "0.30000000000000004"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
        (math.nan, "NaN"),
    ])
    def test_format_float(self, v, expected):
        assert StringUtil.format_float(v) == expected

    @pytest.mark.parametrize("components, symbols, expected", [
        ((1.0, 2.0), ("", "ε"), "(1+2ε)"),
        ((-1.0, -2.0), ("", "ε"), "(-1-2ε)"),
        ((0.0, -0.0), ("", "ε"), "(0-0ε)"),
        ((math.inf, math.inf), ("", "ε"), "(+Inf+Infε)"),
        ((1.0, 0.5, -3.0, 1e-7), ("", "i", "j", "k"), "(1+0.5i-3j+1e-07k)"),
    ])
    def test_format_components(self, components, symbols, expected):
        assert StringUtil.format_components(components, symbols) == expected


class TestRingUtil:

    @pytest.mark.parametrize("x, expected", [
        (2.0, (2.0,)),
        (3, (3.0,)),
        (complex(1, -2), (1.0, -2.0)),
    ])
    def test_components(self, x, expected):
        assert RingUtil.components(x) == expected

    @pytest.mark.parametrize("x, expected", [
        (0.0, True),
        (1e-9, True),
        (1e-7, False),
        (complex(0, 1e-9), True),
        (complex(0, 1), False),
    ])
    def test_is_zero_divisor(self, x, expected):
        assert RingUtil.is_zero_divisor(x) == expected

    def test_inverse(self):
        assert RingUtil.inverse(4.0) == 0.25
        assert RingUtil.inverse(complex(0, 1)) == complex(0, -1)

    def test_zero_like(self):
        assert RingUtil.zero_like(2.5) == 0.0
        assert RingUtil.zero_like(complex(1, 1)) == 0j
