# core/transform.py
import math

import numpy as np

from core.vector import Vector3

SINGULAR_EPSILON = 1e-12


class Transform:
    """
    An object-to-world affine transform (the cumulative transform matrix of a
    scene-graph node) together with the matrices derived from it.

    The inverse and the normal matrix (inverse-transpose of the upper 3x3) are
    computed once at construction. Normals must go through the normal matrix so
    that they stay perpendicular to the surface under non-uniform scaling.
    """

    def __init__(self, matrix=None):
        if matrix is None:
            matrix = np.identity(4)
        self.matrix = np.array(matrix, dtype=np.float64)
        if self.matrix.shape != (4, 4):
            raise ValueError(f"Transform expects a 4x4 matrix, got shape {self.matrix.shape}")
        if abs(np.linalg.det(self.matrix)) < SINGULAR_EPSILON:
            raise ValueError("Transform matrix is singular and cannot be inverted")

        self.inverse = np.linalg.inv(self.matrix)
        self.normal_matrix = np.linalg.inv(self.matrix[:3, :3]).T
        for m in (self.matrix, self.inverse, self.normal_matrix):
            m.setflags(write=False)

    @staticmethod
    def _homogeneous(v: Vector3, is_vector: bool) -> np.ndarray:
        # Directions ignore translation (w=0), points pick it up (w=1).
        return np.array([v.x, v.y, v.z, 0.0 if is_vector else 1.0])

    def apply(self, v: Vector3, is_vector: bool) -> Vector3:
        """Object space -> world space."""
        return Vector3.from_array(self.matrix @ self._homogeneous(v, is_vector))

    def apply_inverse(self, v: Vector3, is_vector: bool) -> Vector3:
        """World space -> object space."""
        return Vector3.from_array(self.inverse @ self._homogeneous(v, is_vector))

    def apply_normal(self, n: Vector3) -> Vector3:
        """Transforms an object-space normal to world space (not normalized)."""
        return Vector3.from_array(self.normal_matrix @ n.to_array())

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"


def translation(offset: Vector3) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = [offset.x, offset.y, offset.z]
    return m


def scaling(factors: Vector3) -> np.ndarray:
    return np.diag([factors.x, factors.y, factors.z, 1.0])


def rotation(axis: Vector3, angle: float) -> np.ndarray:
    """
    Rotation by angle (radians) about an arbitrary axis through the origin
    (Rodrigues' formula, right-handed).
    """
    a = axis.normalize()
    if a.length() == 0:
        raise ValueError("Rotation axis must be non-zero")
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    x, y, z = a.x, a.y, a.z
    return np.array([
        [t * x * x + c,     t * x * y - s * z, t * x * z + s * y, 0.0],
        [t * x * y + s * z, t * y * y + c,     t * y * z - s * x, 0.0],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c,     0.0],
        [0.0,               0.0,               0.0,               1.0],
    ])
