from geometry.hittable import HitRecord, Primitive
from geometry.sphere import Sphere
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.cone import Cone
from geometry.shapes import ShapeType, make_primitive
from geometry.world import find_nearest_hit

__all__ = [
    "HitRecord",
    "Primitive",
    "Sphere",
    "Cube",
    "Cylinder",
    "Cone",
    "ShapeType",
    "make_primitive",
    "find_nearest_hit",
]
