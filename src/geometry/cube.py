# geometry/cube.py
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import INFINITY, intersect_axis_plane, smallest_positive
from core.uv import UV
from core.vector import Vector3
from geometry.hittable import SURFACE_EPSILON, Primitive
from materials.material import Material
from materials.textures import Texture

X, Y, Z = 0, 1, 2


class Cube(Primitive):
    """
    Axis-aligned cube centered at the object-space origin.
    """
    def __init__(self, transform: Transform, material: Material,
                 texture: Optional[Texture] = None, side_length: float = 1.0):
        super().__init__(transform, material, texture)
        self.side_length = side_length
        self.half = side_length / 2

    def _in_square(self, a: float, b: float) -> bool:
        return abs(a) <= self.half and abs(b) <= self.half

    def intersect(self, ray: Ray) -> float:
        o, d = ray.origin, ray.direction
        candidates = []
        # Each face pair is perpendicular to `axis`; the hit must land inside the
        # face square spanned by the other two axes.
        for axis, (u_axis, v_axis) in ((Z, (X, Y)), (Y, (X, Z)), (X, (Y, Z))):
            for offset in (self.half, -self.half):
                t = intersect_axis_plane(o, d, axis, offset)
                if t == INFINITY:
                    continue
                p = ray.at(t)
                if self._in_square(p[u_axis], p[v_axis]):
                    candidates.append(t)
        return smallest_positive(*candidates)

    def face_axis(self, point: Vector3) -> int:
        """
        Axis of the face a surface point lies on: the coordinate closest to its
        face plane. Edges and corners resolve to the first axis in x, y, z order.
        """
        distances = [abs(abs(point[axis]) - self.half) for axis in (X, Y, Z)]
        best = min(distances)
        for axis in (X, Y, Z):
            if distances[axis] <= best + SURFACE_EPSILON:
                return axis
        return Z

    def object_normal(self, point: Vector3) -> Vector3:
        axis = self.face_axis(point)
        sign = 1.0 if point[axis] >= 0 else -1.0
        n = [0.0, 0.0, 0.0]
        n[axis] = sign
        return Vector3(*n)

    def surface_to_uv(self, point: Vector3) -> UV:
        x, y, z = point
        axis = self.face_axis(point)
        positive = point[axis] >= 0
        # Each face is unrolled as seen from outside the cube, v pointing up
        # (or toward -z on the top face).
        if axis == X:
            a, b = (-z, y) if positive else (z, y)
        elif axis == Y:
            a, b = (x, -z) if positive else (x, z)
        else:
            a, b = (x, y) if positive else (-x, y)
        return UV(a / self.side_length + 0.5, b / self.side_length + 0.5)
