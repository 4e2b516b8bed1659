# geometry/cone.py
import math
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import (INFINITY, circle_u, cone_lateral_hit, intersect_axis_plane,
                        smallest_positive)
from core.uv import UV
from core.vector import Vector3
from geometry.hittable import SURFACE_EPSILON, Primitive
from materials.material import Material
from materials.textures import Texture

Y = 1


class Cone(Primitive):
    """
    Cone around the object-space y axis with its apex at y = h/2 and a flat base
    of radius r on the plane y = -h/2.

    The lateral surface is x^2 + z^2 = k * (h/2 - y)^2 with k = (r/h)^2. That
    quadric is double-napped; the mirrored nappe lies entirely above the apex,
    so the height bound y <= h/2 is what rejects it. Both roots are checked
    because the nearer one may belong to that nappe.
    """
    def __init__(self, transform: Transform, material: Material,
                 texture: Optional[Texture] = None, radius: float = 0.5, height: float = 1.0):
        super().__init__(transform, material, texture)
        self.radius = radius
        self.height = height
        self.half_height = height / 2
        self.slope_sq = (radius / height) ** 2

    def intersect(self, ray: Ray) -> float:
        o, d = ray.origin, ray.direction
        candidates = [cone_lateral_hit(o.x, o.y, o.z, d.x, d.y, d.z,
                                       self.slope_sq, self.half_height)]

        # Flat base bounded by the disk x^2 + z^2 <= r^2.
        t = intersect_axis_plane(o, d, Y, -self.half_height)
        if t < INFINITY:
            p = ray.at(t)
            if p.x * p.x + p.z * p.z <= self.radius * self.radius:
                candidates.append(t)

        return smallest_positive(*candidates)

    def _on_base(self, point: Vector3) -> bool:
        return abs(point.y + self.half_height) < SURFACE_EPSILON

    def object_normal(self, point: Vector3) -> Vector3:
        if self._on_base(point):
            return Vector3(0, -1, 0)
        if point.x == 0 and point.z == 0:
            # The gradient vanishes at the apex.
            return Vector3(0, 1, 0)
        # Gradient of the lateral quadric.
        return Vector3(2 * point.x, 2 * self.slope_sq * (self.half_height - point.y), 2 * point.z)

    def surface_to_uv(self, point: Vector3) -> UV:
        diameter = 2 * self.radius
        if self._on_base(point):
            return UV(point.x / diameter + 0.5, point.z / diameter + 0.5)
        # u is arbitrary at the apex where x = z = 0.
        if math.isclose(point.y, self.half_height, abs_tol=SURFACE_EPSILON):
            u = 0.5
        else:
            u = circle_u(point.x, point.z)
        return UV(u, point.y / self.height + 0.5)
