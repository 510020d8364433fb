import numpy as np

from typing import Tuple, Union

from .dual_algebra import ZeroDivisorError
from .float_util import DELTA, FloatUtil
from .string_util import StringUtil


class Quaternion:
    """
    A Hamilton quaternion of the form q = w + x.i + y.j + z.k.

    The basic rules are i^2 = j^2 = k^2 = ijk = -1, so that i.j = -j.i = k, j.k = -k.j = i and k.i = -i.k = j.
    Quaternion multiplication is noncommutative but associative. Quaternions are the base ring of the dual
    quaternions (see Hamilton).
    """

    # CONSTANTS

    SYMBOLS = ("", "i", "j", "k")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, w: Union[float, int] = 0.0, x: Union[float, int] = 0.0,
                 y: Union[float, int] = 0.0, z: Union[float, int] = 0.0):
        """
        Construct a quaternion with the specified components.

        :param w:   The w (real) component.
        :param x:   The x (i) component.
        :param y:   The y (j) component.
        :param z:   The z (k) component.
        """
        self.w = float(w)  # type: float
        self.x = float(x)  # type: float
        self.y = float(y)  # type: float
        self.z = float(z)  # type: float

    # SPECIAL METHODS

    def __add__(self, rhs: "Quaternion") -> "Quaternion":
        if type(rhs) is not Quaternion:
            return NotImplemented
        return Quaternion(self.w + rhs.w, self.x + rhs.x, self.y + rhs.y, self.z + rhs.z)

    def __eq__(self, rhs: object) -> bool:
        if type(rhs) is not Quaternion:
            return NotImplemented
        return Quaternion.close(self, rhs)

    def __mul__(self, rhs: Union["Quaternion", float, int]) -> "Quaternion":
        """
        Multiply this quaternion by another one (or by a scalar).

        :param rhs: The other quaternion (or scalar).
        :return:    The result of the operation.
        """
        if isinstance(rhs, (int, float)):
            return Quaternion(self.w * rhs, self.x * rhs, self.y * rhs, self.z * rhs)
        if type(rhs) is not Quaternion:
            return NotImplemented

        return Quaternion(
            self.w * rhs.w - self.x * rhs.x - self.y * rhs.y - self.z * rhs.z,
            self.w * rhs.x + self.x * rhs.w + self.y * rhs.z - self.z * rhs.y,
            self.w * rhs.y - self.x * rhs.z + self.y * rhs.w + self.z * rhs.x,
            self.w * rhs.z + self.x * rhs.y - self.y * rhs.x + self.z * rhs.w
        )

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        return "Quaternion({}, {}, {}, {})".format(self.w, self.x, self.y, self.z)

    def __rmul__(self, factor: Union[float, int]) -> "Quaternion":
        """
        Scale the quaternion by the specified factor.

        :param factor:  The scaling factor.
        :return:        A scaled version of the quaternion.
        """
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self * factor

    def __str__(self) -> str:
        return StringUtil.format_components(self.components(), Quaternion.SYMBOLS)

    def __sub__(self, rhs: "Quaternion") -> "Quaternion":
        if type(rhs) is not Quaternion:
            return NotImplemented
        return Quaternion(self.w - rhs.w, self.x - rhs.x, self.y - rhs.y, self.z - rhs.z)

    # PUBLIC STATIC METHODS

    @staticmethod
    def close(lhs: "Quaternion", rhs: "Quaternion", tolerance: float = DELTA) -> bool:
        """
        Check whether two quaternions are approximately equal, up to a tolerance.

        :param lhs:         The first quaternion.
        :param rhs:         The second quaternion.
        :param tolerance:   The tolerance value.
        :return:            True, if the two quaternions are approximately equal, or False otherwise.
        """
        return all(FloatUtil.equals(a, b, tolerance) for a, b in zip(lhs.components(), rhs.components()))

    @staticmethod
    def from_vector(v) -> "Quaternion":
        """
        Make a pure quaternion x.i + y.j + z.k from a 3D vector.

        :param v:   The 3D vector.
        :return:    The pure quaternion.
        """
        v = np.array(v).astype(float)  # type: np.ndarray
        return Quaternion(0.0, v[0], v[1], v[2])

    # PUBLIC METHODS

    def components(self) -> Tuple[float, float, float, float]:
        return self.w, self.x, self.y, self.z

    def conjugate(self) -> "Quaternion":
        """
        Calculate the conjugate of the quaternion.

        :return:    The conjugate of the quaternion.
        """
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def copy(self) -> "Quaternion":
        return Quaternion(self.w, self.x, self.y, self.z)

    def inverse(self) -> "Quaternion":
        """
        Calculate the inverse of the quaternion.

        :return:                    The inverse of the quaternion.
        :raises ZeroDivisorError:   If the quaternion is zero.
        """
        if self.is_zero_divisor():
            raise ZeroDivisorError("Cannot invert the zero quaternion")
        return self.conjugate() * (1 / self.quadrance())

    def is_zero_divisor(self, tolerance: float = DELTA) -> bool:
        """
        Determine whether or not the quaternion is a zero divisor. Since the quaternions form a division ring,
        this is only the case for the zero quaternion.

        :param tolerance:   The tolerance value.
        :return:            True, if the quaternion is (approximately) zero, or False otherwise.
        """
        return all(FloatUtil.is_zero(c, tolerance) for c in self.components())

    def quadrance(self) -> float:
        """
        Calculate the quadrance (squared norm) of the quaternion.

        :return:    The quadrance of the quaternion.
        """
        return (self * self.conjugate()).w

    def to_vector(self) -> np.ndarray:
        """
        Get the vector (i, j, k) part of the quaternion.

        :return:    The vector part of the quaternion.
        """
        return np.array([self.x, self.y, self.z])
