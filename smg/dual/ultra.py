from typing import Tuple, Union

from .dual_algebra import TwistedDualAlgebra
from .super import Super


class Ultra(TwistedDualAlgebra[Super]):
    """
    An ultra dual number of the form a + b.u1 + c.u2 + d.u3 + e.u4 + f.u5 + g.u6 + h.u7, stored as the pair of
    super dual numbers (a + b.sigma + c.tau + d.sigma.tau, e + f.sigma + g.tau + h.sigma.tau), the second of which
    is the coefficient of the new dual unit u4.

    The basic rules are:

        u1 * u2 = -u2 * u1 = u3
        u1 * u4 = -u4 * u1 = u5
        u2 * u4 = -u4 * u2 = u6
        u2 * u5 = -u5 * u2 = u7
        u3 * u4 = -u4 * u3 = u7
        u6 * u1 = -u1 * u6 = u7

    All other products of generators vanish. Multiplication is noncommutative and nonassociative.
    """

    # CONSTANTS

    SYMBOLS = ("", "υ₁", "υ₂", "υ₃", "υ₄", "υ₅", "υ₆", "υ₇")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0,
                 e: Union[float, int] = 0.0, f: Union[float, int] = 0.0,
                 g: Union[float, int] = 0.0, h: Union[float, int] = 0.0):
        """
        Construct an ultra dual number with the specified components.

        :param a:   The real component.
        :param b:   The u1 component.
        :param c:   The u2 component.
        :param d:   The u3 component.
        :param e:   The u4 component.
        :param f:   The u5 component.
        :param g:   The u6 component.
        :param h:   The u7 component.
        """
        self.real = Super(a, b, c, d)  # type: Super
        self.dual = Super(e, f, g, h)  # type: Super
