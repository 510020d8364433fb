from typing import Tuple, Union

from .dual_algebra import ZeroDivisorError
from .float_util import DELTA, FloatUtil
from .string_util import StringUtil


class SplitComplex:
    """
    A split-complex (perplex) number of the form a + b.s, where s^2 = +1.

    The split-complex numbers form a commutative, associative ring whose zero divisors are the elements on the
    "light cone" a = +/-b. They are the base ring of the dual perplex numbers.
    """

    # CONSTANTS

    SYMBOLS = ("", "s")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0):
        """
        Construct a split-complex number with the specified components.

        :param a:   The real component.
        :param b:   The s component.
        """
        self.a = float(a)  # type: float
        self.b = float(b)  # type: float

    # SPECIAL METHODS

    def __add__(self, rhs: "SplitComplex") -> "SplitComplex":
        if type(rhs) is not SplitComplex:
            return NotImplemented
        return SplitComplex(self.a + rhs.a, self.b + rhs.b)

    def __eq__(self, rhs: object) -> bool:
        if type(rhs) is not SplitComplex:
            return NotImplemented
        return SplitComplex.close(self, rhs)

    def __mul__(self, rhs: Union["SplitComplex", float, int]) -> "SplitComplex":
        """
        Multiply this split-complex number by another one (or by a scalar).

        :param rhs: The other split-complex number (or scalar).
        :return:    The result of the operation.
        """
        if isinstance(rhs, (int, float)):
            return SplitComplex(self.a * rhs, self.b * rhs)
        if type(rhs) is not SplitComplex:
            return NotImplemented

        return SplitComplex(self.a * rhs.a + self.b * rhs.b, self.a * rhs.b + self.b * rhs.a)

    def __neg__(self) -> "SplitComplex":
        return SplitComplex(-self.a, -self.b)

    def __repr__(self) -> str:
        return "SplitComplex({}, {})".format(self.a, self.b)

    def __rmul__(self, factor: Union[float, int]) -> "SplitComplex":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self * factor

    def __str__(self) -> str:
        return StringUtil.format_components(self.components(), SplitComplex.SYMBOLS)

    def __sub__(self, rhs: "SplitComplex") -> "SplitComplex":
        if type(rhs) is not SplitComplex:
            return NotImplemented
        return SplitComplex(self.a - rhs.a, self.b - rhs.b)

    # PUBLIC STATIC METHODS

    @staticmethod
    def close(lhs: "SplitComplex", rhs: "SplitComplex", tolerance: float = DELTA) -> bool:
        """
        Check whether two split-complex numbers are approximately equal, up to a tolerance.

        :param lhs:         The first split-complex number.
        :param rhs:         The second split-complex number.
        :param tolerance:   The tolerance value.
        :return:            True, if the two numbers are approximately equal, or False otherwise.
        """
        return FloatUtil.equals(lhs.a, rhs.a, tolerance) and FloatUtil.equals(lhs.b, rhs.b, tolerance)

    # PUBLIC METHODS

    def components(self) -> Tuple[float, float]:
        return self.a, self.b

    def conjugate(self) -> "SplitComplex":
        """
        Calculate the conjugate of the split-complex number.

        :return:    The conjugate of the split-complex number.
        """
        return SplitComplex(self.a, -self.b)

    def copy(self) -> "SplitComplex":
        return SplitComplex(self.a, self.b)

    def inverse(self) -> "SplitComplex":
        """
        Calculate the inverse of the split-complex number.

        :return:                    The inverse of the split-complex number.
        :raises ZeroDivisorError:   If the split-complex number is a zero divisor.
        """
        if self.is_zero_divisor():
            raise ZeroDivisorError("Cannot invert the split-complex zero divisor {}".format(self))
        return self.conjugate() * (1 / self.quadrance())

    def is_zero_divisor(self, tolerance: float = DELTA) -> bool:
        """
        Determine whether or not the split-complex number is a zero divisor, i.e. whether it lies on the light cone.

        :param tolerance:   The tolerance value.
        :return:            True, if the split-complex number is a zero divisor, or False otherwise.
        """
        return FloatUtil.equals(self.a, self.b, tolerance) or FloatUtil.equals(self.a, -self.b, tolerance)

    def quadrance(self) -> float:
        """
        Calculate the (indefinite) quadrance a^2 - b^2 of the split-complex number.

        :return:    The quadrance of the split-complex number.
        """
        return (self * self.conjugate()).a
