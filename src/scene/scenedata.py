# scene/scenedata.py
"""
Plain data handed from scene construction to the renderer. Everything is in
world space; shape transforms are the flattened cumulative transform of their
scene-graph node.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

import numpy as np

from core.vector import Vector3
from geometry.shapes import ShapeType
from materials.material import Material


class LightType(Enum):
    POINT = "point"
    DIRECTIONAL = "directional"
    SPOT = "spot"


@dataclass(frozen=True)
class SceneGlobalData:
    ka: float = 1.0
    kd: float = 1.0
    ks: float = 1.0


@dataclass(frozen=True)
class SceneLightData:
    """
    function holds the attenuation coefficients (c1, c2, c3) of
    1 / (c1 + c2*d + c3*d^2). angle is the outer cone half-angle and penumbra the
    width of the falloff band inside it, both in radians (spot lights only).
    """
    type: LightType
    color: Vector3
    position: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    direction: Vector3 = field(default_factory=lambda: Vector3(0, 0, -1))
    function: Tuple[float, float, float] = (1.0, 0.0, 0.0)
    angle: float = 0.0
    penumbra: float = 0.0


@dataclass(frozen=True)
class SceneCameraData:
    """height_angle is the vertical field of view in radians."""
    position: Vector3
    look: Vector3
    up: Vector3
    height_angle: float
    aperture: float = 0.0
    focal_length: float = 0.0


@dataclass(frozen=True)
class ScenePrimitive:
    type: ShapeType
    material: Material = field(default_factory=Material)


@dataclass
class RenderShapeData:
    primitive: ScenePrimitive
    ctm: np.ndarray = field(default_factory=lambda: np.identity(4))


@dataclass
class RenderData:
    global_data: SceneGlobalData
    camera_data: SceneCameraData
    lights: List[SceneLightData] = field(default_factory=list)
    shapes: List[RenderShapeData] = field(default_factory=list)
