# geometry/cylinder.py
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import (INFINITY, circle_u, cylinder_lateral_hit, intersect_axis_plane,
                        smallest_positive)
from core.uv import UV
from core.vector import Vector3
from geometry.hittable import SURFACE_EPSILON, Primitive
from materials.material import Material
from materials.textures import Texture

Y = 1


class Cylinder(Primitive):
    """
    Capped cylinder around the object-space y axis, spanning y in [-h/2, h/2].
    """
    def __init__(self, transform: Transform, material: Material,
                 texture: Optional[Texture] = None, radius: float = 0.5, height: float = 1.0):
        super().__init__(transform, material, texture)
        self.radius = radius
        self.height = height
        self.half_height = height / 2

    def _in_disk(self, p: Vector3) -> bool:
        return p.x * p.x + p.z * p.z <= self.radius * self.radius

    def intersect(self, ray: Ray) -> float:
        o, d = ray.origin, ray.direction
        candidates = []

        # Flat caps on the planes y = +-h/2, bounded by the disk x^2 + z^2 <= r^2.
        for offset in (self.half_height, -self.half_height):
            t = intersect_axis_plane(o, d, Y, offset)
            if t < INFINITY and self._in_disk(ray.at(t)):
                candidates.append(t)

        # Lateral surface of the infinite cylinder x^2 + z^2 = r^2, cut to the height range.
        candidates.append(cylinder_lateral_hit(o.x, o.y, o.z, d.x, d.y, d.z,
                                               self.radius, self.half_height))

        return smallest_positive(*candidates)

    def _on_cap(self, point: Vector3) -> int:
        """+1 for the top cap, -1 for the bottom cap, 0 for the lateral surface."""
        if abs(point.y - self.half_height) < SURFACE_EPSILON:
            return 1
        if abs(point.y + self.half_height) < SURFACE_EPSILON:
            return -1
        return 0

    def object_normal(self, point: Vector3) -> Vector3:
        cap = self._on_cap(point)
        if cap:
            return Vector3(0, cap, 0)
        # Points straight out from the axis.
        return Vector3(2 * point.x, 0, 2 * point.z)

    def surface_to_uv(self, point: Vector3) -> UV:
        cap = self._on_cap(point)
        diameter = 2 * self.radius
        if cap == 1:
            return UV(point.x / diameter + 0.5, -point.z / diameter + 0.5)
        if cap == -1:
            return UV(point.x / diameter + 0.5, point.z / diameter + 0.5)
        return UV(circle_u(point.x, point.z), point.y / self.height + 0.5)
