# geometry/shapes.py
from enum import Enum
from typing import Callable, Dict, Optional

from core.transform import Transform
from geometry.cone import Cone
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.hittable import Primitive
from geometry.sphere import Sphere
from materials.material import Material
from materials.textures import Texture


class ShapeType(Enum):
    """The closed set of primitive shapes the renderer can trace."""
    SPHERE = "sphere"
    CUBE = "cube"
    CYLINDER = "cylinder"
    CONE = "cone"


# Canonical object-space sizes: every shape fits in the unit cube centered at
# the origin, and scene transforms do the rest.
_BUILDERS: Dict[ShapeType, Callable[[Transform, Material, Optional[Texture]], Primitive]] = {
    ShapeType.SPHERE: lambda tf, mat, tex: Sphere(tf, mat, tex, radius=0.5),
    ShapeType.CUBE: lambda tf, mat, tex: Cube(tf, mat, tex, side_length=1.0),
    ShapeType.CYLINDER: lambda tf, mat, tex: Cylinder(tf, mat, tex, radius=0.5, height=1.0),
    ShapeType.CONE: lambda tf, mat, tex: Cone(tf, mat, tex, radius=0.5, height=1.0),
}

_MISSING = set(ShapeType) - set(_BUILDERS)
if _MISSING:
    raise RuntimeError(f"No primitive builder for {sorted(t.value for t in _MISSING)}")


def make_primitive(shape_type: ShapeType, transform: Transform, material: Material,
                   texture: Optional[Texture] = None) -> Primitive:
    """
    Builds the primitive for a shape type. Raises ValueError for anything that
    is not one of the known shape types.
    """
    try:
        builder = _BUILDERS[ShapeType(shape_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported shape type: {shape_type!r}") from None
    return builder(transform, material, texture)
