import math
import numpy as np

from typing import Sequence


class StringUtil:
    """Utility functions for making the string representations of hypercomplex values."""

    # PUBLIC STATIC METHODS

    @staticmethod
    def format_components(components: Sequence[float], symbols: Sequence[str]) -> str:
        """
        Make the string representation of a hypercomplex value from its components.

        .. note::
            If the components are a, b, c, ... and the symbols are "", "i", "j", ..., the result is "(a+bi+cj...)",
            similar to Python's own complex values. The first component is printed as is; every later one has an
            explicit sign.

        :param components:  The scalar components, in canonical basis order.
        :param symbols:     The basis symbols, one per component.
        :return:            The string representation.
        """
        assert len(components) == len(symbols)

        parts = ["(", StringUtil.format_float(components[0]), symbols[0]]
        for v, symbol in zip(components[1:], symbols[1:]):
            if math.copysign(1.0, v) < 0:
                parts.append(StringUtil.format_float(v))
            elif math.isinf(v):
                parts.append("+Inf")
            else:
                parts.append("+" + StringUtil.format_float(v))
            parts.append(symbol)
        parts.append(")")

        return "".join(parts)

    @staticmethod
    def format_float(v: float) -> str:
        """
        Format a float in the shortest %g style.

        .. note::
            The shortest digit string that round-trips is used. Scientific notation is used when the decimal
            exponent is less than -4 or at least 6, and exponents always have at least two digits, e.g. "1e+06"
            or "2.5e-05".

        :param v:   The float.
        :return:    The formatted float.
        """
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "+Inf" if v > 0 else "-Inf"

        scientific = np.format_float_scientific(v, unique=True, trim='-', exp_digits=2)  # type: str
        exponent = int(scientific.split("e")[1])                                          # type: int
        if exponent < -4 or exponent >= 6:
            return scientific
        else:
            return np.format_float_positional(v, unique=True, trim='-')
