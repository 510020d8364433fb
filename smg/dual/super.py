from typing import Tuple, Union

from .dual_algebra import TwistedDualAlgebra
from .real import Real


class Super(TwistedDualAlgebra[Real]):
    """
    A super dual number of the form a + b.sigma + c.tau + d.sigma.tau, stored as the pair of dual reals
    (a + b.sigma, c + d.sigma), the second of which is the coefficient of tau.

    The basic rules are:

        sigma * sigma = tau * tau = 0
        sigma * tau = -tau * sigma = sigma.tau
        sigma.tau * sigma.tau = 0
        sigma * sigma.tau = sigma.tau * sigma = 0
        tau * sigma.tau = sigma.tau * tau = 0

    The two generators anticommute, so multiplication is noncommutative (but still associative).
    """

    # CONSTANTS

    SYMBOLS = ("", "σ", "τ", "στ")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0):
        """
        Construct a super dual number with the specified components.

        :param a:   The real component.
        :param b:   The sigma component.
        :param c:   The tau component.
        :param d:   The sigma.tau component.
        """
        self.real = Real(a, b)  # type: Real
        self.dual = Real(c, d)  # type: Real
