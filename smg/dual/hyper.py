from typing import Tuple, Union

from .dual_algebra import DualAlgebra
from .real import Real


class Hyper(DualAlgebra[Real]):
    """
    A hyper dual number of the form a + b.eps + c.eta + d.eps.eta, stored as the pair of dual reals (a + b.eps,
    c + d.eps), the second of which is the coefficient of eta.

    The basic rules are:

        eps * eps = eta * eta = 0
        eps * eta = eta * eps = eps.eta
        eps.eta * eps.eta = 0
        eps * eps.eta = eps.eta * eps = 0
        eta * eps.eta = eps.eta * eta = 0

    Multiplication is commutative and associative. Hyper dual numbers carry two independent first derivatives
    together with the mixed second derivative (in the eps.eta component).
    """

    # CONSTANTS

    SYMBOLS = ("", "ε", "η", "εη")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0):
        """
        Construct a hyper dual number with the specified components.

        :param a:   The real component.
        :param b:   The eps component.
        :param c:   The eta component.
        :param d:   The eps.eta component.
        """
        self.real = Real(a, b)  # type: Real
        self.dual = Real(c, d)  # type: Real
