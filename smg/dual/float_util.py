import numpy as np


# CONSTANTS

# The default tolerance used when comparing floating-point components.
DELTA = 1e-8  # type: float


class FloatUtil:
    """Utility functions for comparing floating-point components."""

    # PUBLIC STATIC METHODS

    @staticmethod
    def equals(a: float, b: float, tolerance: float = DELTA) -> bool:
        """
        Check whether two floats are approximately equal, up to a tolerance.

        .. note::
            Infinities of the same sign compare equal, as do two NaNs.

        :param a:           The first float.
        :param b:           The second float.
        :param tolerance:   The tolerance value.
        :return:            True, if |a - b| <= tolerance, or False otherwise.
        """
        return bool(np.isclose(a, b, rtol=0.0, atol=tolerance, equal_nan=True))

    @staticmethod
    def is_zero(a: float, tolerance: float = DELTA) -> bool:
        """
        Check whether a float is approximately zero, up to a tolerance.

        :param a:           The float.
        :param tolerance:   The tolerance value.
        :return:            True, if |a| <= tolerance, or False otherwise.
        """
        return FloatUtil.equals(a, 0.0, tolerance)
