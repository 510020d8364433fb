"""Unit tests for dual perplex numbers."""

import pytest

from smg.dual import Perplex, SplitComplex, ZeroDivisorError


one = Perplex(1)
s = Perplex(0, 1)
eps = Perplex(0, 0, 1)
eps_s = Perplex(0, 0, 0, 1)


class TestPerplex:

    @pytest.mark.parametrize("x, y, expected", [
        (eps, eps, Perplex()),
        (s, s, one),
        (eps_s, eps_s, Perplex()),
        (eps, s, eps_s),
        (s, eps, eps_s),
        (eps_s, s, eps),
        (s, eps_s, eps),
        (eps, eps_s, Perplex()),
        (eps_s, eps, Perplex()),
    ])
    def test_basis_products(self, x, y, expected):
        assert x * y == expected

    def test_str(self):
        assert str(Perplex(1, 2, -3, 4)) == "(1+2s-3ε+4εs)"

    def test_conjugates(self):
        z = Perplex(1, 2, 3, 4)
        assert z.conjugate() == Perplex(1, -2, -3, -4)
        assert z.dual_conjugate() == Perplex(1, 2, -3, -4)

    @pytest.mark.parametrize("z, expected", [
        (Perplex(2, 1, 5, 6), 3.0),
        (Perplex(1, 2, 5, 6), -3.0),
        (Perplex(1, 1, 5, 6), 0.0),
    ])
    def test_quadrance(self, z, expected):
        assert z.quadrance() == pytest.approx(expected)

    def test_dual_quadrance(self):
        assert Perplex(2, 1, 5, 6).dual_quadrance() == SplitComplex(5, 4)

    @pytest.mark.parametrize("z, expected", [
        (Perplex(0, 0, 1, 1), True),
        (Perplex(1, 1, 0, 0), True),
        (Perplex(1, -1, 2, 3), True),
        (Perplex(2, 1, 0, 0), False),
        (Perplex(0, 1, 0, 0), False),
    ])
    def test_is_zero_divisor(self, z, expected):
        assert z.is_zero_divisor() == expected

    def test_inverse(self):
        assert s.inverse() == s
        z = Perplex(2, 1, -1, 3)
        assert z * z.inverse() == one
        assert z.inverse() * z == one

    def test_quotient(self):
        x, y = Perplex(1, 2, 3, 4), Perplex(3, -1, 0.5, 2)
        assert (x * y) / y == x

    def test_light_cone_division_fails(self):
        with pytest.raises(ZeroDivisorError):
            Perplex(1, 2, 3, 4) / Perplex(2, 2, 0, 0)

    @pytest.mark.parametrize("z, expected", [
        (Perplex(2 ** -14, 0, 0, 0), Perplex(2 ** 14, 0, 0, 0)),
        (Perplex(2 ** -14, 0, 1, 0), Perplex(2 ** 14, 0, -2 ** 28, 0)),
        (Perplex(1e-4, 0, 0, 0), Perplex(1e4, 0, 0, 0)),
    ])
    def test_inverse_with_small_real_part(self, z, expected):
        assert not z.is_zero_divisor()
        assert z.inverse() == expected
        assert one / z == expected
        assert Perplex(1, 2, 3, 4) / z == Perplex(1, 2, 3, 4) * expected

    def test_inverse_near_light_cone(self):
        z = Perplex(1, 1 - 2e-8, 0, 0)
        assert not z.is_zero_divisor()
        assert (z * z.inverse()).equals(one, tolerance=1e-6)
        assert (z / z).equals(one, tolerance=1e-6)
