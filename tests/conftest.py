"""Pytest configuration and shared fixtures."""

import math

import numpy as np
import pytest

from core.transform import scaling, translation
from core.vector import Vector3
from geometry.shapes import ShapeType
from materials.material import Material
from materials.texture_loader import TextureLibrary
from scene.scene import RayTraceScene
from scene.scenedata import (RenderData, RenderShapeData, SceneCameraData, SceneGlobalData,
                             ScenePrimitive)


def shape(shape_type: ShapeType, material: Material = None, ctm=None) -> RenderShapeData:
    return RenderShapeData(
        ScenePrimitive(shape_type, material if material is not None else Material()),
        np.identity(4) if ctm is None else ctm,
    )


def placed(offset, scale=(1, 1, 1)):
    return translation(Vector3(*offset)) @ scaling(Vector3(*scale))


@pytest.fixture
def default_camera():
    """Camera on the +z axis looking at the origin."""
    return SceneCameraData(
        position=Vector3(0, 0, 5),
        look=Vector3(0, 0, -1),
        up=Vector3(0, 1, 0),
        height_angle=math.radians(30),
    )


@pytest.fixture
def make_scene(default_camera):
    """Factory building a RayTraceScene from shapes and lights."""
    def _make(shapes=(), lights=(), global_data=None, width=9, height=9,
              camera=None, textures=None):
        render_data = RenderData(
            global_data=global_data if global_data is not None else SceneGlobalData(1.0, 1.0, 1.0),
            camera_data=camera if camera is not None else default_camera,
            lights=list(lights),
            shapes=list(shapes),
        )
        return RayTraceScene(width, height, render_data,
                             textures if textures is not None else TextureLibrary())
    return _make
