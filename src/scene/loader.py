# scene/loader.py
"""
JSON scene description loader.

A scene file holds global illumination coefficients, a camera, a list of
lights and a tree of nodes. Each node carries an ordered list of local
transforms, its own primitives and child nodes. The tree is flattened
depth-first into a list of primitives paired with their cumulative transform
(parent CTM times the node's transforms, in listed order). Angles are in degrees.

    {
      "globalData": {"ka": 0.5, "kd": 0.5, "ks": 0.5},
      "camera": {"position": [0, 0, 5], "look": [0, 0, -1], "up": [0, 1, 0],
                 "heightAngle": 45},
      "lights": [{"type": "point", "color": [1, 1, 1], "position": [2, 2, 2],
                  "attenuation": [1, 0, 0]}],
      "root": {
        "transforms": [{"translate": [0, 0, 0]}, {"rotate": [0, 1, 0], "angle": 30},
                       {"scale": [1, 2, 1]}],
        "primitives": [{"type": "sphere",
                        "material": {"diffuse": [1, 0, 0], "shininess": 20,
                                     "texture": {"file": "wood.png", "repeatU": 2}}}],
        "children": []
      }
    }
"""
import json
import logging
import math
from typing import Any, Dict, List

import numpy as np

from core.transform import SINGULAR_EPSILON, rotation, scaling, translation
from core.vector import Vector3
from geometry.shapes import ShapeType
from materials.material import Material, TextureMap
from scene.scenedata import (LightType, RenderData, RenderShapeData, SceneCameraData,
                             SceneGlobalData, SceneLightData, ScenePrimitive)

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


def _vector(value: Any, name: str) -> Vector3:
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise SceneError(f"'{name}' must be a list of 3 numbers, got {value!r}")
    try:
        return Vector3(float(value[0]), float(value[1]), float(value[2]))
    except (TypeError, ValueError):
        raise SceneError(f"'{name}' must contain numbers, got {value!r}") from None


def _number(obj: Dict[str, Any], key: str, default: float) -> float:
    value = obj.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def _parse_global(obj: Dict[str, Any]) -> SceneGlobalData:
    return SceneGlobalData(
        ka=_number(obj, "ka", 1.0),
        kd=_number(obj, "kd", 1.0),
        ks=_number(obj, "ks", 1.0),
    )


def _parse_camera(obj: Dict[str, Any]) -> SceneCameraData:
    for key in ("position", "look", "up", "heightAngle"):
        if key not in obj:
            raise SceneError(f"camera is missing '{key}'")
    height_angle = _number(obj, "heightAngle", 0.0)
    if not 0 < height_angle < 180:
        raise SceneError(f"camera heightAngle must be in (0, 180) degrees, got {height_angle}")
    look = _vector(obj["look"], "camera.look")
    if look.length() == 0:
        raise SceneError("camera look vector must be non-zero")
    return SceneCameraData(
        position=_vector(obj["position"], "camera.position"),
        look=look,
        up=_vector(obj["up"], "camera.up"),
        height_angle=math.radians(height_angle),
        aperture=_number(obj, "aperture", 0.0),
        focal_length=_number(obj, "focalLength", 0.0),
    )


def _parse_light(obj: Dict[str, Any]) -> SceneLightData:
    try:
        light_type = LightType(obj.get("type"))
    except ValueError:
        raise SceneError(f"Unsupported light type: {obj.get('type')!r}") from None
    attenuation = obj.get("attenuation", [1.0, 0.0, 0.0])
    if not isinstance(attenuation, (list, tuple)) or len(attenuation) != 3:
        raise SceneError(f"light attenuation must be [c1, c2, c3], got {attenuation!r}")
    if light_type in (LightType.DIRECTIONAL, LightType.SPOT) and "direction" not in obj:
        raise SceneError(f"{light_type.value} light is missing 'direction'")
    if light_type in (LightType.POINT, LightType.SPOT) and "position" not in obj:
        raise SceneError(f"{light_type.value} light is missing 'position'")
    return SceneLightData(
        type=light_type,
        color=_vector(obj.get("color", [1, 1, 1]), "light.color"),
        position=_vector(obj.get("position", [0, 0, 0]), "light.position"),
        direction=_vector(obj.get("direction", [0, 0, -1]), "light.direction"),
        function=tuple(float(c) for c in attenuation),
        angle=math.radians(_number(obj, "angle", 0.0)),
        penumbra=math.radians(_number(obj, "penumbra", 0.0)),
    )


def _parse_material(obj: Dict[str, Any]) -> Material:
    black = [0, 0, 0]
    texture = obj.get("texture")
    texture_map = TextureMap()
    if texture is not None:
        if not isinstance(texture, dict):
            raise SceneError(f"material texture must be an object, got {texture!r}")
        if "file" not in texture:
            raise SceneError("material texture is missing 'file'")
        texture_map = TextureMap(
            filename=str(texture["file"]),
            is_used=bool(texture.get("used", True)),
            repeat_u=_number(texture, "repeatU", 1.0),
            repeat_v=_number(texture, "repeatV", 1.0),
        )
    return Material(
        ambient=_vector(obj.get("ambient", black), "material.ambient"),
        diffuse=_vector(obj.get("diffuse", black), "material.diffuse"),
        specular=_vector(obj.get("specular", black), "material.specular"),
        reflective=_vector(obj.get("reflective", black), "material.reflective"),
        shininess=_number(obj, "shininess", 0.0),
        blend=_number(obj, "blend", 0.0),
        texture_map=texture_map,
    )


def _parse_primitive(obj: Dict[str, Any]) -> ScenePrimitive:
    try:
        shape_type = ShapeType(obj.get("type"))
    except ValueError:
        raise SceneError(f"Unsupported shape type: {obj.get('type')!r}") from None
    return ScenePrimitive(type=shape_type, material=_parse_material(obj.get("material", {})))


def _local_transform(obj: Dict[str, Any]) -> np.ndarray:
    if "translate" in obj:
        return translation(_vector(obj["translate"], "translate"))
    if "scale" in obj:
        return scaling(_vector(obj["scale"], "scale"))
    if "rotate" in obj:
        axis = _vector(obj["rotate"], "rotate")
        if axis.length() == 0:
            raise SceneError("rotation axis must be non-zero")
        return rotation(axis, math.radians(_number(obj, "angle", 0.0)))
    if "matrix" in obj:
        matrix = np.array(obj["matrix"], dtype=np.float64)
        if matrix.shape != (4, 4):
            raise SceneError(f"transform matrix must be 4x4, got shape {matrix.shape}")
        return matrix
    raise SceneError(f"Unknown transform: {obj!r}")


def flatten_scene_graph(node: Dict[str, Any], parent_ctm: np.ndarray,
                        shapes: List[RenderShapeData]) -> None:
    """
    Depth-first traversal that appends every primitive in the tree with its
    cumulative transform. Transforms listed first are outermost.
    """
    ctm = np.array(parent_ctm, dtype=np.float64)
    for transform in node.get("transforms", []):
        ctm = ctm @ _local_transform(transform)

    for primitive in node.get("primitives", []):
        if abs(np.linalg.det(ctm)) < SINGULAR_EPSILON:
            raise SceneError(f"primitive {primitive.get('type')!r} has a singular transform")
        shapes.append(RenderShapeData(primitive=_parse_primitive(primitive), ctm=ctm.copy()))

    for child in node.get("children", []):
        flatten_scene_graph(child, ctm, shapes)


def parse_scene(description: Dict[str, Any]) -> RenderData:
    """Builds RenderData from an already-decoded scene description."""
    if "camera" not in description:
        raise SceneError("scene is missing 'camera'")
    shapes: List[RenderShapeData] = []
    flatten_scene_graph(description.get("root", {}), np.identity(4), shapes)
    return RenderData(
        global_data=_parse_global(description.get("globalData", {})),
        camera_data=_parse_camera(description["camera"]),
        lights=[_parse_light(light) for light in description.get("lights", [])],
        shapes=shapes,
    )


def load_scene(path: str) -> RenderData:
    """Reads and validates a JSON scene file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            description = json.load(f)
    except json.JSONDecodeError as e:
        raise SceneError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(description, dict):
        raise SceneError(f"{path}: top level must be an object")

    render_data = parse_scene(description)
    logger.info("Loaded scene %s: %d shape(s), %d light(s)",
                path, len(render_data.shapes), len(render_data.lights))
    return render_data
