# geometry/sphere.py
import math
from typing import Optional

from core.ray import Ray
from core.transform import Transform
from core.utils import circle_u, sphere_hit
from core.uv import UV
from core.vector import Vector3
from geometry.hittable import Primitive
from materials.material import Material
from materials.textures import Texture


class Sphere(Primitive):
    """
    Sphere of the given radius centered at the object-space origin.
    """
    def __init__(self, transform: Transform, material: Material,
                 texture: Optional[Texture] = None, radius: float = 0.5):
        super().__init__(transform, material, texture)
        self.radius = radius

    def intersect(self, ray: Ray) -> float:
        o, d = ray.origin, ray.direction
        return sphere_hit(o.x, o.y, o.z, d.x, d.y, d.z, self.radius)

    def object_normal(self, point: Vector3) -> Vector3:
        # Gradient of x^2 + y^2 + z^2 - r^2.
        return point * 2

    def surface_to_uv(self, point: Vector3) -> UV:
        # v is linear in latitude, u is the fraction of the equator swept from +x.
        sin_lat = min(max(point.y / self.radius, -1.0), 1.0)
        v = math.asin(sin_lat) / math.pi + 0.5
        if v == 0 or v == 1:
            # Any u is valid at the poles.
            return UV(0.5, v)
        return UV(circle_u(point.x, point.z), v)
