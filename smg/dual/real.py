import math

from typing import Tuple, Union

from .dual_algebra import DualAlgebra, ZeroDivisorError


class Real(DualAlgebra[float]):
    """
    A dual real number of the form ^n^ = r + eps * d, where eps^2 = 0.

    Multiplication is commutative and associative. Since eps^2 = 0, applying a smooth function f to r + eps * d
    gives f(r) + eps * d * f'(r), so the dual part carries a first derivative along with each value (this is the
    basis of forward-mode automatic differentiation).

    See "Dual Quaternions for Rigid Transformation Blending" by Kavan et al.
    """

    # CONSTANTS

    SYMBOLS = ("", "ε")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, r: Union[float, int] = 0.0, d: Union[float, int] = 0.0):
        """
        Construct a dual real number with the specified components.

        :param r:   The real component of the dual number.
        :param d:   The dual component of the dual number.
        """
        self.real = float(r)  # type: float
        self.dual = float(d)  # type: float

    # PUBLIC METHODS

    def cos(self) -> "Real":
        """
        Calculate the cosine of the dual number.

        :return:    The cosine of the dual number.
        """
        return Real(math.cos(self.real), -self.dual * math.sin(self.real))

    def cosh(self) -> "Real":
        """
        Calculate the hyperbolic cosine of the dual number.

        :return:    The hyperbolic cosine of the dual number.
        """
        return Real(math.cosh(self.real), self.dual * math.sinh(self.real))

    def exp(self) -> "Real":
        """
        Calculate the exponential of the dual number.

        :return:    The exponential of the dual number.
        """
        e = math.exp(self.real)  # type: float
        return Real(e, self.dual * e)

    def sin(self) -> "Real":
        """
        Calculate the sine of the dual number.

        :return:    The sine of the dual number.
        """
        return Real(math.sin(self.real), self.dual * math.cos(self.real))

    def sinh(self) -> "Real":
        """
        Calculate the hyperbolic sine of the dual number.

        :return:    The hyperbolic sine of the dual number.
        """
        return Real(math.sinh(self.real), self.dual * math.cosh(self.real))

    def sqrt(self) -> "Real":
        """
        Calculate the square root of the dual number.

        :return:                    The square root of the dual number.
        :raises ValueError:         If the real component of the dual number is negative.
        :raises ZeroDivisorError:   If the dual number is a zero divisor (its square root has no dual part).
        """
        if self.real < 0:
            raise ValueError("Cannot take the square root of {}".format(self))
        if self.is_zero_divisor():
            raise ZeroDivisorError("Cannot take the square root of the zero divisor {}".format(self))

        root_r = math.sqrt(self.real)  # type: float
        return Real(root_r, self.dual / (2 * root_r))
