# scene/scene.py
import logging
from typing import List, Optional

from camera.camera import Camera
from core.transform import Transform
from geometry.hittable import Primitive
from geometry.shapes import make_primitive
from lights.light import Light, make_light
from materials.texture_loader import TextureLibrary
from scene.scenedata import RenderData, SceneGlobalData

logger = logging.getLogger(__name__)


class RayTraceScene:
    """
    Everything the renderer reads during one render: image size, camera,
    lights, primitives and the global illumination coefficients.

    Textures are loaded once per distinct filename before any primitive is
    built, and primitives reference the shared instances. Nothing here changes
    once construction has finished.
    """
    def __init__(self, width: int, height: int, render_data: RenderData,
                 textures: Optional[TextureLibrary] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.global_data: SceneGlobalData = render_data.global_data
        self.camera = Camera(render_data.camera_data, width, height)
        self.lights: List[Light] = [make_light(data) for data in render_data.lights]

        self.textures = textures if textures is not None else TextureLibrary()
        self.textures.load_all(shape.primitive.material.texture_map for shape in render_data.shapes)

        self.primitives: List[Primitive] = []
        for shape in render_data.shapes:
            material = shape.primitive.material
            self.primitives.append(make_primitive(
                shape.primitive.type,
                Transform(shape.ctm),
                material,
                self.textures.get(material.texture_map),
            ))

        logger.info("Scene built: %dx%d, %d primitive(s), %d light(s)",
                    width, height, len(self.primitives), len(self.lights))
