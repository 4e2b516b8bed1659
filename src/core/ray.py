# core/ray.py
import math

from core.vector import Vector3


class Ray:
    """
    Represents a ray r(t) = origin + t * direction in a single coordinate space
    (camera, object or world). The space is a caller discipline.

    t_hit holds the nearest intersection recorded so far and starts at +infinity.
    Callers only ever record a t that is closer than the current one.
    """
    __slots__ = ("origin", "direction", "t_hit")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction
        self.t_hit = math.inf

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def record_intersection(self, t: float) -> None:
        self.t_hit = t

    def has_intersection(self) -> bool:
        return 0 < self.t_hit < math.inf

    def intersection_point(self) -> Vector3:
        if not self.has_intersection():
            raise ValueError(f"Ray has no recorded intersection (t_hit={self.t_hit})")
        return self.at(self.t_hit)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction}, t_hit={self.t_hit})"
