from typing import Tuple, Union

from .dual_algebra import DualAlgebra
from .split_complex import SplitComplex


class Perplex(DualAlgebra[SplitComplex]):
    """
    A dual perplex number of the form a + b.s + c.eps + d.eps.s, stored as the pair of split-complex numbers
    (a + b.s, c + d.s).

    The basic rules are:

        eps * eps = 0, s * s = +1, eps.s * eps.s = 0
        eps * s = s * eps = eps.s
        eps.s * s = s * eps.s = +eps
        eps * eps.s = eps.s * eps = 0

    Multiplication is commutative and associative. The conjugate of a + b.s + c.eps + d.eps.s is
    a - b.s - c.eps - d.eps.s.

    .. note::
        Because the split-complex numbers have zero divisors of their own, a dual perplex number is a zero divisor
        whenever its real part lies on the light cone (a = +/-b), not only when it vanishes. For the same reason,
        the quadrance a^2 - b^2 can be negative.
    """

    # CONSTANTS

    SYMBOLS = ("", "s", "ε", "εs")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0):
        """
        Construct a dual perplex number with the specified components.

        :param a:   The real component.
        :param b:   The s component.
        :param c:   The eps component.
        :param d:   The eps.s component.
        """
        self.real = SplitComplex(a, b)  # type: SplitComplex
        self.dual = SplitComplex(c, d)  # type: SplitComplex
