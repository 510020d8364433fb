from typing import Tuple, Union

from .dual_algebra import DualAlgebra
from .real import Real


class Complex(DualAlgebra[complex]):
    """
    A dual complex number of the form a + b.i + c.eps + d.eps.i, stored as the pair (a + b.i, c + d.i).

    The basic rules are:

        eps * eps = 0, i * i = -1, eps.i * eps.i = 0
        eps * i = i * eps = eps.i
        eps.i * i = i * eps.i = -eps
        eps * eps.i = eps.i * eps = 0

    Multiplication is commutative and associative.
    """

    # CONSTANTS

    SYMBOLS = ("", "i", "ε", "εi")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0):
        """
        Construct a dual complex number with the specified components.

        :param a:   The real component.
        :param b:   The i component.
        :param c:   The eps component.
        :param d:   The eps.i component.
        """
        self.real = complex(a, b)  # type: complex
        self.dual = complex(c, d)  # type: complex

    # PUBLIC METHODS

    def conjugate(self) -> "Complex":
        """
        Calculate the complex conjugate of the dual complex number (this negates the i and eps.i components).

        :return:    The complex conjugate of the dual complex number.
        """
        return Complex.from_parts(self.real.conjugate(), self.dual.conjugate())

    def ring_quadrance(self) -> Real:
        """
        Calculate the full quadrance z * conjugate(z) of the dual complex number, which is a dual real number.

        :return:    The full quadrance of the dual complex number.
        """
        p = self * self.conjugate()  # type: Complex
        return Real(p.real.real, p.dual.real)
