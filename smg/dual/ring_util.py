from typing import Any, Tuple

from .float_util import DELTA, FloatUtil


class RingUtil:
    """
    Utility functions that let the dual algebras treat every base ring in the same way, whether its elements are
    built-in numbers (float, complex) or instances of one of the ring classes in this package. A ring class is
    expected to provide components(), conjugate(), copy(), inverse(), is_zero_divisor(), the arithmetic operators
    and multiplication by a float.
    """

    # PUBLIC STATIC METHODS

    @staticmethod
    def components(x: Any) -> Tuple[float, ...]:
        """
        Get the scalar components of a base-ring element.

        :param x:   The base-ring element.
        :return:    The scalar components of the element, in canonical basis order.
        """
        if isinstance(x, complex):
            return x.real, x.imag
        elif isinstance(x, (int, float)):
            return float(x),
        else:
            return x.components()

    @staticmethod
    def conjugate(x: Any) -> Any:
        return x.conjugate()

    @staticmethod
    def copy(x: Any) -> Any:
        """
        Make a copy of a base-ring element.

        :param x:   The base-ring element.
        :return:    A copy of the element.
        """
        if isinstance(x, (int, float, complex)):
            return x
        else:
            return x.copy()

    @staticmethod
    def equals(x: Any, y: Any, tolerance: float = DELTA) -> bool:
        """
        Check whether two base-ring elements are approximately equal, up to a tolerance.

        :param x:           The first element.
        :param y:           The second element.
        :param tolerance:   The tolerance value.
        :return:            True, if the two elements are approximately equal, or False otherwise.
        """
        return all(
            FloatUtil.equals(a, b, tolerance) for a, b in zip(RingUtil.components(x), RingUtil.components(y))
        )

    @staticmethod
    def inverse(x: Any) -> Any:
        """
        Calculate the multiplicative inverse of a base-ring element.

        .. note::
            The ring classes check for zero divisors using the same test as is_zero_divisor, so an element that
            passes that test can always be inverted.

        :param x:   The base-ring element.
        :return:    The inverse of the element.
        """
        if isinstance(x, (int, float, complex)):
            return 1 / x
        else:
            return x.inverse()

    @staticmethod
    def is_zero_divisor(x: Any, tolerance: float = DELTA) -> bool:
        """
        Determine whether or not a base-ring element is a zero divisor (and so has no inverse).

        :param x:           The base-ring element.
        :param tolerance:   The tolerance value.
        :return:            True, if the element is a zero divisor, or False otherwise.
        """
        if isinstance(x, (int, float, complex)):
            return all(FloatUtil.is_zero(c, tolerance) for c in RingUtil.components(x))
        else:
            return x.is_zero_divisor(tolerance)

    @staticmethod
    def zero_like(x: Any) -> Any:
        """
        Make the zero element of the ring to which a base-ring element belongs.

        :param x:   The base-ring element.
        :return:    The zero element of its ring.
        """
        return type(x)()
