# materials/material.py
from dataclasses import dataclass, field

from core.vector import Vector3


@dataclass(frozen=True)
class TextureMap:
    """
    Reference to a texture image by filename. The image itself lives in the
    scene's texture library and is shared between every primitive that names it.
    """
    filename: str = ""
    is_used: bool = False
    repeat_u: float = 1.0
    repeat_v: float = 1.0


@dataclass(frozen=True)
class Material:
    """
    Phong surface description. Colors are linear RGB in [0,1]; the global
    ka/kd/ks coefficients of the scene scale them at shading time.

    blend interpolates the diffuse color between the texture (blend=1) and the
    material's own diffuse color (blend=0).
    """
    ambient: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    diffuse: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    specular: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    reflective: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    shininess: float = 0.0
    blend: float = 0.0
    texture_map: TextureMap = field(default_factory=TextureMap)
