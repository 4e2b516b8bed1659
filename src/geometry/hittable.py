# geometry/hittable.py
from typing import Optional

from core.color import rgba_to_color
from core.ray import Ray
from core.transform import Transform
from core.uv import UV
from core.vector import Vector3
from materials.material import Material
from materials.textures import Texture

# Tolerance used to decide which face/cap a surface point lies on.
SURFACE_EPSILON = 1e-4

NO_TEXTURE_COLOR = Vector3(0, 0, 0)


class HitRecord:
    """
    Result of the nearest-hit search: the primitive that was hit, the ray
    parameter of the hit, and the hit point in that primitive's object space.
    """
    __slots__ = ("primitive", "t", "object_point")

    def __init__(self, primitive: "Primitive", t: float, object_point: Vector3):
        self.primitive = primitive
        self.t = t
        self.object_point = object_point

    def __repr__(self) -> str:
        return f"HitRecord({type(self.primitive).__name__}, t={self.t}, object_point={self.object_point})"


class Primitive:
    """
    Base class for the implicit-surface primitives. A primitive is defined in its
    own object space and placed in the world by its transform. Intersection,
    normal and UV queries all take object-space inputs.

    Primitives are immutable once built and are shared read-only while rendering.
    """
    def __init__(self, transform: Transform, material: Material,
                 texture: Optional[Texture] = None):
        self.transform = transform
        self.material = material
        self.texture = texture

    def intersect(self, ray: Ray) -> float:
        """
        Smallest strictly positive t at which the object-space ray meets the
        surface, or +infinity when it misses.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def object_normal(self, point: Vector3) -> Vector3:
        """Unnormalized object-space normal at a surface point."""
        raise NotImplementedError("object_normal() must be implemented by subclasses.")

    def surface_to_uv(self, point: Vector3) -> UV:
        """Object-space surface point -> texture coordinates in [0,1]^2 (unclamped)."""
        raise NotImplementedError("surface_to_uv() must be implemented by subclasses.")

    def object_to_world(self, v: Vector3, is_vector: bool) -> Vector3:
        return self.transform.apply(v, is_vector)

    def world_to_object(self, v: Vector3, is_vector: bool) -> Vector3:
        return self.transform.apply_inverse(v, is_vector)

    def to_object_space(self, world_ray: Ray) -> Ray:
        """
        Re-expresses a world-space ray in object space. The direction is not
        renormalized, so t values are the same in both spaces.
        """
        return Ray(self.world_to_object(world_ray.origin, False),
                   self.world_to_object(world_ray.direction, True))

    def world_normal(self, object_point: Vector3) -> Vector3:
        """Normalized world-space normal at an object-space surface point."""
        return self.transform.apply_normal(self.object_normal(object_point)).normalize()

    def texture_color(self, object_point: Vector3) -> Vector3:
        """
        Texture color at an object-space surface point as [0,1] floats, or black
        when the material does not use a texture.
        """
        texture_map = self.material.texture_map
        if self.texture is None or not texture_map.is_used:
            return NO_TEXTURE_COLOR
        uv = self.surface_to_uv(object_point).clamp()
        return rgba_to_color(self.texture.color_at_uv(uv, texture_map.repeat_u, texture_map.repeat_v))
