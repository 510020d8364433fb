import math
import numpy as np

from typing import Generic, Sequence, Tuple, Type, TypeVar, Union

from .float_util import DELTA
from .ring_util import RingUtil
from .string_util import StringUtil


# TYPE VARIABLES

# The base ring type (the type of the real and dual parts).
R = TypeVar('R')

# The dual algebra type (used to type the methods that construct new values).
D = TypeVar('D', bound="DualAlgebra")


# EXCEPTIONS

class ZeroDivisorError(ZeroDivisionError):
    """Raised when attempting to invert (or divide by) a zero divisor."""
    pass


# MAIN CLASSES

class DualAlgebra(Generic[R]):
    """
    A dual number of the form ^z^ = r + eps * d over a base ring R, where eps^2 = 0 and r, d are in R.

    Values are multiplied using the standard rule (p0, p1) * (q0, q1) = (p0 * q0, p0 * q1 + p1 * q0). Derived
    classes supply the constructor (which takes the flattened scalar components in canonical basis order), the
    basis symbols and, where they differ from the default, the conjugation and inversion rules.
    """

    # CONSTANTS

    # The basis symbols, in canonical basis order. The number of symbols is the dimension of the algebra.
    SYMBOLS = ()  # type: Tuple[str, ...]

    # The real and dual parts of the value. These are set by the derived class constructors (or by from_parts).
    real = None  # type: R
    dual = None  # type: R

    # SPECIAL METHODS

    def __add__(self: D, rhs: D) -> D:
        """
        Add another value to this one.

        :param rhs: The other value.
        :return:    The result of the operation.
        """
        if type(rhs) is not type(self):
            return NotImplemented
        return self.from_parts(self.real + rhs.real, self.dual + rhs.dual)

    def __eq__(self, rhs: object) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented
        return self.equals(rhs)

    def __iadd__(self: D, rhs: D) -> D:
        """
        Add another value to this one (in-place).

        :param rhs: The other value.
        :return:    This value (after the operation).
        """
        if type(rhs) is not type(self):
            return NotImplemented
        self.real, self.dual = self.real + rhs.real, self.dual + rhs.dual
        return self

    def __imul__(self: D, rhs: Union[D, float, int]) -> D:
        """
        Multiply this value by another one (in-place).

        .. note::
            Both parts of the product are computed before either is assigned, so z *= z is safe.

        :param rhs: The other value (or a scalar).
        :return:    This value (after the operation).
        """
        product = self * rhs
        self.real, self.dual = product.real, product.dual
        return self

    def __isub__(self: D, rhs: D) -> D:
        """
        Subtract another value from this one (in-place).

        :param rhs: The other value.
        :return:    This value (after the operation).
        """
        if type(rhs) is not type(self):
            return NotImplemented
        self.real, self.dual = self.real - rhs.real, self.dual - rhs.dual
        return self

    def __mul__(self: D, rhs: Union[D, float, int]) -> D:
        """
        Multiply this value by another one (or dilate it by a scalar).

        :param rhs: The other value (or a scalar).
        :return:    The result of the operation.
        """
        if isinstance(rhs, (int, float)):
            return self.dilate(rhs)
        if type(rhs) is not type(self):
            return NotImplemented
        return self.from_parts(*self._multiply_parts(self.real, self.dual, rhs.real, rhs.dual))

    def __neg__(self: D) -> D:
        """
        Calculate the negation of the value.

        :return:    The negation of the value.
        """
        return self.dilate(-1)

    def __repr__(self) -> str:
        return "{}({})".format(type(self).__name__, ", ".join(repr(c) for c in self.components()))

    def __rmul__(self: D, factor: Union[float, int]) -> D:
        """
        Dilate the value by the specified factor.

        :param factor:  The scaling factor.
        :return:        A scaled version of the value.
        """
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.dilate(factor)

    def __rtruediv__(self: D, lhs: Union[float, int]) -> D:
        """
        Divide a scalar by this value.

        :param lhs:                 The scalar.
        :return:                    The result of the operation.
        :raises ZeroDivisorError:   If this value is a zero divisor.
        """
        if not isinstance(lhs, (int, float)):
            return NotImplemented
        return self.inverse().dilate(lhs)

    def __str__(self) -> str:
        """
        Get the informal string representation of the value, e.g. "(1+2ε)".

        :return:    The informal string representation of the value.
        """
        return StringUtil.format_components(self.components(), self.SYMBOLS)

    def __sub__(self: D, rhs: D) -> D:
        """
        Subtract another value from this one.

        :param rhs: The other value.
        :return:    The result of the operation.
        """
        if type(rhs) is not type(self):
            return NotImplemented
        return self.from_parts(self.real - rhs.real, self.dual - rhs.dual)

    def __truediv__(self: D, rhs: Union[D, float, int]) -> D:
        """
        Divide this value by another one (or by a scalar).

        :param rhs:                 The divisor.
        :return:                    The quotient.
        :raises ZeroDivisorError:   If the divisor is a zero divisor.
        """
        if isinstance(rhs, (int, float)):
            if rhs == 0:
                raise ZeroDivisorError("Cannot divide {} by zero".format(self))
            return self.dilate(1 / rhs)
        if type(rhs) is not type(self):
            return NotImplemented

        return self * rhs.inverse()

    # PUBLIC STATIC METHODS

    @staticmethod
    def associator(w: D, x: D, y: D) -> D:
        """
        Calculate the associator (w * x) * y - w * (x * y) of three values.

        .. note::
            The associator vanishes for every triple if and only if the algebra is associative.

        :param w:   The first value.
        :param x:   The second value.
        :param y:   The third value.
        :return:    The associator of the three values.
        """
        return (w * x) * y - w * (x * y)

    @staticmethod
    def close(lhs: "DualAlgebra", rhs: "DualAlgebra", tolerance: float = DELTA) -> bool:
        """
        Check whether two values are approximately equal, up to a tolerance.

        :param lhs:         The first value.
        :param rhs:         The second value.
        :param tolerance:   The tolerance value.
        :return:            True, if the two values are approximately equal, or False otherwise.
        """
        return lhs.equals(rhs, tolerance)

    @staticmethod
    def commutator(x: D, y: D) -> D:
        """
        Calculate the commutator x * y - y * x of two values.

        :param x:   The first value.
        :param y:   The second value.
        :return:    The commutator of the two values.
        """
        return x * y - y * x

    # PUBLIC CLASS METHODS

    @classmethod
    def dimension(cls) -> int:
        return len(cls.SYMBOLS)

    @classmethod
    def from_array(cls: Type[D], arr: Union[np.ndarray, Sequence[float]]) -> D:
        """
        Make a value from an array of its scalar components.

        :param arr: The scalar components, in canonical basis order.
        :return:    The value.
        """
        return cls(*np.asarray(arr, dtype=float).tolist())

    @classmethod
    def from_parts(cls: Type[D], real: R, dual: R) -> D:
        """
        Make a value from its real and dual parts.

        .. note::
            The parts are used directly rather than copied.

        :param real:    The real part.
        :param dual:    The dual part.
        :return:        The value.
        """
        z = cls.__new__(cls)  # type: D
        z.real = real
        z.dual = dual
        return z

    @classmethod
    def inf(cls: Type[D], *signs: int) -> D:
        """
        Make an infinite value, with the sign of each infinite component chosen separately.

        :param signs:       One sign per component: +Inf is used for signs >= 0, and -Inf otherwise.
        :return:            The infinite value.
        :raises ValueError: If the number of signs does not match the dimension of the algebra.
        """
        if len(signs) != cls.dimension():
            raise ValueError("Expected {} signs, got {}".format(cls.dimension(), len(signs)))
        return cls(*[math.inf if sign >= 0 else -math.inf for sign in signs])

    @classmethod
    def nan(cls: Type[D]) -> D:
        """
        Make a value all of whose components are NaN.

        :return:    The NaN value.
        """
        return cls(*[math.nan] * cls.dimension())

    # PUBLIC METHODS

    def components(self) -> Tuple[float, ...]:
        """
        Get the scalar components of the value.

        :return:    The scalar components of the value, in canonical basis order.
        """
        return RingUtil.components(self.real) + RingUtil.components(self.dual)

    def conjugate(self: D) -> D:
        """
        Calculate the conjugate of the value.

        .. note::
            By default, this conjugates the real part in its own ring and negates the dual part.

        :return:    The conjugate of the value.
        """
        return self.from_parts(RingUtil.conjugate(self.real), -self.dual)

    def copy(self: D) -> D:
        """
        Make a (deep) copy of the value.

        :return:    A copy of the value.
        """
        return self.from_parts(RingUtil.copy(self.real), RingUtil.copy(self.dual))

    def dilate(self: D, factor: Union[float, int]) -> D:
        """
        Scale every component of the value by a real factor.

        :param factor:  The scaling factor.
        :return:        A scaled version of the value.
        """
        return self.from_parts(self.real * factor, self.dual * factor)

    def dual_conjugate(self: D) -> D:
        """
        Calculate the dual conjugate of the value, i.e. negate its dual part only.

        :return:    The dual conjugate of the value.
        """
        return self.from_parts(RingUtil.copy(self.real), -self.dual)

    def dual_quadrance(self) -> R:
        """
        Calculate the dual quadrance of the value, i.e. the real part of z * dual_conjugate(z).

        :return:    The dual quadrance of the value (an element of the base ring).
        """
        return (self * self.dual_conjugate()).real

    def equals(self, rhs: "DualAlgebra", tolerance: float = DELTA) -> bool:
        """
        Check whether another value is approximately equal to this one, up to a tolerance.

        :param rhs:         The other value.
        :param tolerance:   The tolerance value.
        :return:            True, if the two values are approximately equal, or False otherwise.
        """
        if type(rhs) is not type(self):
            return False
        return RingUtil.equals(self.real, rhs.real, tolerance) and RingUtil.equals(self.dual, rhs.dual, tolerance)

    def inverse(self: D) -> D:
        """
        Calculate the inverse of the value.

        .. note::
            If the value is (a, b), its inverse is (a^-1, -b * a^-2), i.e. its dual conjugate scaled twice by a^-1.
            Only a is inverted, so the zero-divisor test on a is the only one that applies.

        :return:                    The inverse of the value.
        :raises ZeroDivisorError:   If the value is a zero divisor.
        """
        self._check_invertible()
        inv_real = RingUtil.inverse(self.real)  # type: R
        return self.dual_conjugate().scale(inv_real).scale(inv_real)

    def is_inf(self) -> bool:
        """
        Determine whether or not any component of the value is infinite.

        :return:    True, if any component of the value is infinite, or False otherwise.
        """
        return bool(np.any(np.isinf(self.to_array())))

    def is_nan(self) -> bool:
        """
        Determine whether or not the value is NaN.

        .. note::
            Infinity takes precedence: a value with both an infinite and a NaN component is not NaN.

        :return:    True, if no component is infinite and at least one component is NaN, or False otherwise.
        """
        return not self.is_inf() and bool(np.any(np.isnan(self.to_array())))

    def is_zero_divisor(self, tolerance: float = DELTA) -> bool:
        """
        Determine whether or not the value is a zero divisor (and so cannot be inverted).

        .. note::
            This is the case exactly when the real part of the value is a zero divisor of the base ring.

        :param tolerance:   The tolerance value.
        :return:            True, if the value is a zero divisor, or False otherwise.
        """
        return RingUtil.is_zero_divisor(self.real, tolerance)

    def quadrance(self) -> float:
        """
        Calculate the quadrance of the value, i.e. the real-of-real component of z * conjugate(z).

        :return:    The quadrance of the value.
        """
        return (self * self.conjugate()).components()[0]

    def scale(self: D, factor: R) -> D:
        """
        Scale the value (on the right) by an element of the base ring.

        .. note::
            This is the product z * (factor, 0), so the algebra's own multiplication rule applies.

        :param factor:  The base-ring element.
        :return:        A scaled version of the value.
        """
        return self * self.from_parts(factor, RingUtil.zero_like(factor))

    def set_from(self: D, rhs: D) -> D:
        """
        Set this value's components to the same as those of another one.

        :param rhs: The other value.
        :return:    This value (after the operation).
        """
        self.real = RingUtil.copy(rhs.real)
        self.dual = RingUtil.copy(rhs.dual)
        return self

    def to_array(self) -> np.ndarray:
        """
        Get the scalar components of the value as a numpy array.

        :return:    The scalar components of the value, in canonical basis order.
        """
        return np.array(self.components(), dtype=float)

    # PROTECTED METHODS

    def _check_invertible(self) -> None:
        """Raise an exception if the value is a zero divisor."""
        if self.is_zero_divisor():
            raise ZeroDivisorError("Cannot divide by the zero divisor {}".format(self))

    def _multiply_parts(self, p0: R, p1: R, q0: R, q1: R) -> Tuple[R, R]:
        """
        Multiply (p0, p1) by (q0, q1) using the standard dual number rule.

        :param p0:  The real part of the left operand.
        :param p1:  The dual part of the left operand.
        :param q0:  The real part of the right operand.
        :param q1:  The dual part of the right operand.
        :return:    The real and dual parts of the product.
        """
        return p0 * q0, p0 * q1 + p1 * q0


class TwistedDualAlgebra(DualAlgebra[R]):
    """
    A dual number over a base ring R whose dual unit does not commute with the imaginary units of R.

    Values are multiplied using the twisted rule (p0, p1) * (q0, q1) = (p0 * q0, q1 * p0 + p1 * conj(q0)). For
    these algebras, z * conjugate(z) is the real scalar quadrance(z), so inversion divides the conjugate by it.
    """

    # PUBLIC METHODS

    def inverse(self: D) -> D:
        """
        Calculate the inverse of the value.

        :return:                    The inverse of the value.
        :raises ZeroDivisorError:   If the value is a zero divisor.
        """
        self._check_invertible()
        return self.conjugate().dilate(1 / self.quadrance())

    # PROTECTED METHODS

    def _multiply_parts(self, p0: R, p1: R, q0: R, q1: R) -> Tuple[R, R]:
        # Note: The operand order is significant, since R is not commutative in general.
        return p0 * q0, q1 * p0 + p1 * RingUtil.conjugate(q0)
