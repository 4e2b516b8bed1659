# geometry/world.py
from typing import Optional, Sequence

from core.ray import Ray
from geometry.hittable import HitRecord, Primitive


def find_nearest_hit(ray: Ray, primitives: Sequence[Primitive]) -> Optional[HitRecord]:
    """
    Linear scan for the nearest intersection of a world-space ray.

    Each primitive is tested in its own object space. Every strictly closer,
    strictly positive hit is recorded on the ray, so ray.t_hit only ever
    decreases. Returns the nearest hit or None.
    """
    nearest = None
    for primitive in primitives:
        object_ray = primitive.to_object_space(ray)
        t = primitive.intersect(object_ray)
        if 0 < t < ray.t_hit:
            ray.record_intersection(t)
            nearest = HitRecord(primitive, t, object_ray.at(t))
    return nearest
