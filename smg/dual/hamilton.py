import math
import numpy as np

from scipy.spatial.transform import Rotation
from typing import Tuple, Union

from .dual_algebra import DualAlgebra
from .quaternion import Quaternion
from .real import Real


class Hamilton(DualAlgebra[Quaternion]):
    """
    A dual (Hamilton) quaternion of the form a + b.i + c.j + d.k + eps * (e + f.i + g.j + h.k), stored as the pair
    of quaternions (a + b.i + c.j + d.k, e + f.i + g.j + h.k).

    The basic rules are:

        i * i = j * j = k * k = -1
        i * j = -j * i = k, j * k = -k * j = i, k * i = -i * k = j
        eps * eps = 0
        eps * i = i * eps = eps.i, eps * j = j * eps = eps.j, eps * k = k * eps = eps.k
        eps.i * i = i * eps.i = -eps (and similarly for j and k)
        eps.i * j = -j * eps.i = eps.k, eps.j * k = -k * eps.j = eps.i, eps.k * i = -i * eps.k = eps.j
        all products of two eps terms vanish

    Multiplication is noncommutative but associative. A unit dual quaternion can represent a full rigid-body
    transform: if r is a unit quaternion representing a rotation and t is a translation vector, then r + eps * t.r/2
    represents the rotation followed by the translation.

    See "Dual Quaternions for Rigid Transformation Blending" by Kavan et al.
    """

    # CONSTANTS

    SYMBOLS = ("", "i", "j", "k", "ε", "εi", "εj", "εk")  # type: Tuple[str, ...]

    # CONSTRUCTOR

    def __init__(self, a: Union[float, int] = 0.0, b: Union[float, int] = 0.0,
                 c: Union[float, int] = 0.0, d: Union[float, int] = 0.0,
                 e: Union[float, int] = 0.0, f: Union[float, int] = 0.0,
                 g: Union[float, int] = 0.0, h: Union[float, int] = 0.0):
        """
        Construct a dual quaternion with the specified components.

        :param a:   The real component.
        :param b:   The i component.
        :param c:   The j component.
        :param d:   The k component.
        :param e:   The eps component.
        :param f:   The eps.i component.
        :param g:   The eps.j component.
        :param h:   The eps.k component.
        """
        self.real = Quaternion(a, b, c, d)  # type: Quaternion
        self.dual = Quaternion(e, f, g, h)  # type: Quaternion

    # PUBLIC STATIC METHODS

    @staticmethod
    def from_axis_angle(axis, angle: float) -> "Hamilton":
        """
        Construct a dual quaternion that represents a rotation of a particular angle about an axis.

        :param axis:            The rotation axis.
        :param angle:           The rotation angle.
        :return:                The dual quaternion.
        :raises RuntimeError:   If the rotation axis is invalid.
        """
        # Make sure that the axis is a numpy array.
        axis = np.array(axis).astype(float)  # type: np.ndarray

        # If the axis needs to be normalised:
        axis_length_squared = np.dot(axis, axis)  # type: float
        if abs(axis_length_squared - 1) > 1e-9:
            # If it can be normalised:
            if axis_length_squared > 1e-6:
                # Normalise it.
                axis_length = math.sqrt(axis_length_squared)  # type: float
                axis /= axis_length
            # Otherwise, raise an exception.
            else:
                raise RuntimeError("Could not construct dual quaternion - bad rotation axis")

        # Construct the dual quaternion itself.
        cos_half_theta = math.cos(angle / 2)  # type: float
        sin_half_theta = math.sin(angle / 2)  # type: float
        return Hamilton(cos_half_theta, sin_half_theta * axis[0], sin_half_theta * axis[1], sin_half_theta * axis[2])

    @staticmethod
    def from_point(p) -> "Hamilton":
        """
        Construct a dual quaternion that represents a 3D point.

        :param p:   The point.
        :return:    The dual quaternion.
        """
        return Hamilton.from_parts(Quaternion(1.0), Quaternion.from_vector(p))

    @staticmethod
    def from_rigid_matrix(m: np.ndarray) -> "Hamilton":
        """
        Construct a dual quaternion from a rigid-body matrix.

        :param m:   The rigid-body matrix.
        :return:    The dual quaternion.
        """
        rot = Rotation.from_matrix(m[0:3, 0:3]).as_rotvec()  # type: np.ndarray
        trans = m[0:3, 3]  # type: np.ndarray
        return Hamilton.from_translation(trans) * Hamilton.from_rotation_vector(rot)

    @staticmethod
    def from_rotation_vector(rot) -> "Hamilton":
        """
        Construct a dual quaternion that corresponds to a rotation expressed as a Lie rotation vector.

        :param rot: The Lie rotation vector.
        :return:    The dual quaternion.
        """
        rot = np.array(rot).astype(float)  # type: np.ndarray
        length_squared = np.dot(rot, rot)  # type: float
        if length_squared > 1e-6:
            length = math.sqrt(length_squared)  # type: float
            return Hamilton.from_axis_angle(rot / length, length)
        else:
            return Hamilton.identity()

    @staticmethod
    def from_translation(t) -> "Hamilton":
        """
        Construct a dual quaternion that represents a translation by a 3D vector.

        :param t:   The translation vector.
        :return:    The dual quaternion.
        """
        return Hamilton.from_parts(Quaternion(1.0), Quaternion.from_vector(t) * 0.5)

    @staticmethod
    def identity() -> "Hamilton":
        """
        Make a dual quaternion that corresponds to the identity matrix.

        :return:    A dual quaternion that corresponds to the identity matrix.
        """
        return Hamilton(1.0)

    # PUBLIC METHODS

    def apply(self, p) -> np.ndarray:
        """
        Apply the transformation represented by this dual quaternion to a 3D point.

        :param p:   The 3D point.
        :return:    The transformed point.
        """
        result = self * Hamilton.from_point(p) * self.conjugate()  # type: Hamilton
        return result.dual.to_vector()

    def conjugate(self) -> "Hamilton":
        """
        Calculate the conjugate of the dual quaternion.

        .. note::
            This involves applying both quaternion and dual conjugation, i.e. (a, b) -> (conj(a), -conj(b)).

        :return:    The conjugate of the dual quaternion.
        """
        return Hamilton.from_parts(self.real.conjugate(), -self.dual.conjugate())

    def get_rotation_part(self) -> "Hamilton":
        """
        Get a dual quaternion corresponding to the rotation component of the rigid-body transform represented by
        the dual quaternion.

        :return:    A dual quaternion corresponding to the rotation component of the rigid-body transform represented
                    by the dual quaternion.
        """
        return Hamilton.from_parts(self.real.copy(), Quaternion())

    def get_translation(self) -> np.ndarray:
        """
        Get the translation component of the rigid-body transform represented by the dual quaternion.

        :return:    The translation component of the rigid-body transform represented by the dual quaternion.
        """
        return 2.0 * (self.dual * self.real.conjugate()).to_vector()

    def inverse(self) -> "Hamilton":
        """
        Calculate the inverse of the dual quaternion.

        .. note::
            If the dual quaternion is (a, b), its inverse is (a^-1, -a^-1 * b * a^-1), i.e. its dual conjugate
            scaled by a^-1 on both sides.

        :return:                    The inverse of the dual quaternion.
        :raises ZeroDivisorError:   If the dual quaternion is a zero divisor.
        """
        self._check_invertible()
        inv_real = self.real.inverse()  # type: Quaternion
        return self.dual_conjugate().scale(inv_real).scale_left(inv_real)

    def norm(self) -> Real:
        """
        Calculate the norm of the dual quaternion.

        :return:    The norm of the dual quaternion (a dual real number).
        """
        return self.ring_quadrance().sqrt()

    def normalised(self) -> "Hamilton":
        """
        Calculate a normalised version of the dual quaternion.

        :return:    A normalised version of the dual quaternion.
        """
        inv_norm = self.norm().inverse()  # type: Real
        return Hamilton.from_parts(
            self.real * inv_norm.real,
            self.real * inv_norm.dual + self.dual * inv_norm.real
        )

    def quaternion_conjugate(self) -> "Hamilton":
        """
        Calculate the quaternion conjugate of the dual quaternion, i.e. (a, b) -> (conj(a), conj(b)).

        :return:    The quaternion conjugate of the dual quaternion.
        """
        return Hamilton.from_parts(self.real.conjugate(), self.dual.conjugate())

    def ring_quadrance(self) -> Real:
        """
        Calculate the full quadrance z * quaternion_conjugate(z) of the dual quaternion, which is a dual real number.

        :return:    The full quadrance of the dual quaternion.
        """
        p = self * self.quaternion_conjugate()  # type: Hamilton
        return Real(p.real.w, p.dual.w)

    def scale_left(self, factor: Quaternion) -> "Hamilton":
        """
        Scale the dual quaternion on the left by a quaternion.

        :param factor:  The quaternion.
        :return:        A scaled version of the dual quaternion.
        """
        return Hamilton.from_parts(factor, Quaternion()) * self

    def to_rigid_matrix(self) -> np.ndarray:
        """
        Calculate the rigid-body matrix corresponding to the dual quaternion.

        :return:    The rigid-body matrix corresponding to the dual quaternion.
        """
        m = np.eye(4)  # type: np.ndarray

        # Note: The order here is deliberate, in the sense that scipy expects w last.
        m[0:3, 0:3] = Rotation.from_quat([self.real.x, self.real.y, self.real.z, self.real.w]).as_matrix()
        m[0:3, 3] = self.get_translation()
        return m


# The name commonly used for this algebra in kinematics.
DualQuaternion = Hamilton
