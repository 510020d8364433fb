"""Unit tests for hyper dual numbers."""

import math
import pytest

from smg.dual import Hyper, Real, ZeroDivisorError


one = Hyper(1)
eps = Hyper(0, 1)
eta = Hyper(0, 0, 1)
eps_eta = Hyper(0, 0, 0, 1)


class TestHyper:

    @pytest.mark.parametrize("x, y, expected", [
        (eps, eps, Hyper()),
        (eta, eta, Hyper()),
        (eps, eta, eps_eta),
        (eta, eps, eps_eta),
        (eps_eta, eps_eta, Hyper()),
        (eps, eps_eta, Hyper()),
        (eps_eta, eta, Hyper()),
        (one, eps_eta, eps_eta),
    ])
    def test_basis_products(self, x, y, expected):
        assert x * y == expected

    def test_parts(self):
        z = Hyper(1, 2, 3, 4)
        assert z.real == Real(1, 2)
        assert z.dual == Real(3, 4)
        assert z.components() == (1.0, 2.0, 3.0, 4.0)

    def test_str(self):
        assert str(Hyper(1, 2, -3, 4)) == "(1+2ε-3η+4εη)"

    def test_conjugates(self):
        z = Hyper(1, 2, 3, 4)
        assert z.conjugate() == Hyper(1, -2, -3, -4)
        assert z.dual_conjugate() == Hyper(1, 2, -3, -4)

    def test_mixed_second_derivative(self):
        # For f(x, y) = x^2 y, evaluating at (x + eps, y + eta) gives f + f_x eps + f_y eta + f_xy eps.eta.
        x, y = 1.5, -2.0
        hx = Hyper(x, 1, 0, 0)
        hy = Hyper(y, 0, 1, 0)
        assert hx * hx * hy == Hyper(x * x * y, 2 * x * y, x * x, 2 * x)

    def test_scale_uses_ring_multiplication(self):
        assert Hyper(1, 0, 1, 0).scale(Real(2, 1)) == Hyper(2, 1, 2, 1)

    def test_dual_quadrance(self):
        assert Hyper(2, 1, 5, 7).dual_quadrance() == Real(4, 4)

    @pytest.mark.parametrize("z, expected", [
        (Hyper(0, 0, 1, 1), True),
        (Hyper(0, 1, 1, 1), True),
        (Hyper(1, 0, 0, 0), False),
    ])
    def test_is_zero_divisor(self, z, expected):
        assert z.is_zero_divisor() == expected

    def test_inverse(self):
        z = Hyper(2, 1, -1, 3)
        assert z * z.inverse() == one
        assert Hyper(2).inverse() == Hyper(0.5)

    def test_division_by_zero_divisor_fails(self):
        with pytest.raises(ZeroDivisorError):
            Hyper(0, 1, 2, 3).inverse()

    def test_inf_and_nan(self):
        assert Hyper.inf(1, -1, 1, -1) == Hyper(math.inf, -math.inf, math.inf, -math.inf)
        assert Hyper(1, 2, math.inf, math.nan).is_inf()
        assert not Hyper(1, 2, math.inf, math.nan).is_nan()
        assert Hyper(1, 2, 3, math.nan).is_nan()

    @pytest.mark.parametrize("z, expected", [
        (Hyper(2 ** -14, 0, 0, 0), Hyper(2 ** 14, 0, 0, 0)),
        (Hyper(2 ** -14, 1, 0, 0), Hyper(2 ** 14, -2 ** 28, 0, 0)),
        (Hyper(2 ** -14, 0, 1, 0), Hyper(2 ** 14, 0, -2 ** 28, 0)),
        (Hyper(1e-4, 0, 0, 0), Hyper(1e4, 0, 0, 0)),
    ])
    def test_inverse_with_small_real_part(self, z, expected):
        assert not z.is_zero_divisor()
        assert z.inverse() == expected
        assert one / z == expected
        assert Hyper(1, 2, 3, 4) / z == Hyper(1, 2, 3, 4) * expected

    def test_inverse_with_small_real_part_and_full_dual_part(self):
        z = Hyper(5e-5, 1, 2, 3)
        assert not z.is_zero_divisor()
        inverse = z.inverse()
        assert not inverse.is_inf() and not inverse.is_nan()
        assert (z * inverse).equals(one, tolerance=1e-4)
