"""Unit tests for ultra dual numbers."""

import pytest

from smg.dual import Super, Ultra, ZeroDivisorError


def u(n: int) -> Ultra:
    """Make the n-th basis element of the ultra dual numbers (u(0) is the identity)."""
    components = [0.0] * 8
    components[n] = 1.0
    return Ultra(*components)


one = u(0)


class TestUltra:

    @pytest.mark.parametrize("x, y, expected", [
        (u(1), u(2), u(3)),
        (u(2), u(1), -u(3)),
        (u(1), u(4), u(5)),
        (u(4), u(1), -u(5)),
        (u(2), u(4), u(6)),
        (u(4), u(2), -u(6)),
        (u(2), u(5), u(7)),
        (u(5), u(2), -u(7)),
        (u(3), u(4), u(7)),
        (u(4), u(3), -u(7)),
        (u(6), u(1), u(7)),
        (u(1), u(6), -u(7)),
        (u(1), u(1), Ultra()),
        (u(4), u(4), Ultra()),
        (u(7), u(7), Ultra()),
        (u(3), u(5), Ultra()),
        (u(5), u(6), Ultra()),
    ])
    def test_basis_products(self, x, y, expected):
        assert x * y == expected

    def test_parts(self):
        z = Ultra(1, 2, 3, 4, 5, 6, 7, 8)
        assert z.real == Super(1, 2, 3, 4)
        assert z.dual == Super(5, 6, 7, 8)

    def test_str(self):
        assert str(Ultra(1, 2, 3, 4, -5, 6, 7, 8)) == "(1+2υ₁+3υ₂+4υ₃-5υ₄+6υ₅+7υ₆+8υ₇)"

    def test_nonassociative(self):
        assert Ultra.associator(u(1), u(2), u(4)) == u(7).dilate(2)
        assert Ultra.associator(u(1), u(2), u(3)) == Ultra()

    def test_commutator(self):
        assert Ultra.commutator(u(1), u(4)) == u(5).dilate(2)

    def test_conjugates(self):
        z = Ultra(1, 2, 3, 4, 5, 6, 7, 8)
        assert z.conjugate() == Ultra(1, -2, -3, -4, -5, -6, -7, -8)
        assert z.dual_conjugate() == Ultra(1, 2, 3, 4, -5, -6, -7, -8)

    def test_quadrance(self):
        z = Ultra(3, 2, -1, 4, 5, 6, 7, 8)
        assert z.quadrance() == pytest.approx(9.0)
        assert z * z.conjugate() == Ultra(9)

    @pytest.mark.parametrize("z, expected", [
        (Ultra(0, 1, 2, 3, 4, 5, 6, 7), True),
        (Ultra(0, 0, 0, 0, 1), True),
        (Ultra(2, 1, 2, 3, 4, 5, 6, 7), False),
    ])
    def test_is_zero_divisor(self, z, expected):
        assert z.is_zero_divisor() == expected

    def test_inverse(self):
        z = Ultra(2, 1, 2, 3, 4, 5, 6, 7)
        assert z.inverse() == z.conjugate().dilate(0.25)
        assert z * z.inverse() == one
        assert z.inverse() * z == one

    def test_quotient(self):
        x, y = Ultra(1, 2, 3, 4, 5, 6, 7, 8), Ultra(-2, 1, 0, 3, -1, 2, 0.5, 1)
        assert (x * y) / y == x

    def test_division_by_zero_divisor_fails(self):
        with pytest.raises(ZeroDivisorError):
            one / u(4)
