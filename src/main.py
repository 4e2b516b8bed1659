# main.py
import argparse
import logging
import math
import os
import sys

import numpy as np
import pygame
from PIL import Image

from core.transform import rotation, scaling, translation
from core.vector import Vector3
from geometry.shapes import ShapeType
from materials.presets import PhongPresets
from materials.texture_loader import TextureLibrary
from materials.textures import ImageTexture
from renderer.config import Config
from renderer.raytracer import RayTracer
from scene.loader import load_scene
from scene.scene import RayTraceScene
from scene.scenedata import (LightType, RenderData, RenderShapeData, SceneCameraData,
                             SceneGlobalData, SceneLightData, ScenePrimitive)

logger = logging.getLogger("raytracer")

DEMO_TEXTURE = "demo_checker"


def checker_texture(size: int = 64, squares: int = 8) -> ImageTexture:
    """Two-tone checkerboard generated in memory for the demo scene."""
    cell = size // squares
    ys, xs = np.indices((size, size))
    mask = ((xs // cell) + (ys // cell)) % 2 == 0
    data = np.zeros((size, size, 4), dtype=np.uint8)
    data[mask] = (230, 230, 230, 255)
    data[~mask] = (40, 60, 160, 255)
    return ImageTexture(data, DEMO_TEXTURE)


def create_demo_scene():
    """
    A small scene with every primitive type and every light type: a reflective
    floor, a chrome sphere, a textured cube, a cylinder and a cone.
    """
    shapes = [
        RenderShapeData(ScenePrimitive(ShapeType.CUBE, PhongPresets.floor()),
                        translation(Vector3(0, -1.05, 0)) @ scaling(Vector3(8, 0.1, 8))),
        RenderShapeData(ScenePrimitive(ShapeType.SPHERE, PhongPresets.chrome()),
                        translation(Vector3(0, -0.2, 0)) @ scaling(Vector3(1.6, 1.6, 1.6))),
        RenderShapeData(ScenePrimitive(ShapeType.CUBE,
                                       PhongPresets.textured(DEMO_TEXTURE, blend=0.8)),
                        translation(Vector3(-1.8, -0.5, 0.6)) @
                        rotation(Vector3(0, 1, 0), math.radians(30))),
        RenderShapeData(ScenePrimitive(ShapeType.CYLINDER,
                                       PhongPresets.plastic(Vector3(0.2, 0.7, 0.3))),
                        translation(Vector3(1.8, -0.4, 0.4)) @ scaling(Vector3(0.8, 1.2, 0.8))),
        RenderShapeData(ScenePrimitive(ShapeType.CONE, PhongPresets.gold()),
                        translation(Vector3(0.6, -0.5, 1.6)) @ scaling(Vector3(0.8, 1.0, 0.8))),
    ]
    lights = [
        SceneLightData(LightType.POINT, Vector3(0.8, 0.8, 0.8),
                       position=Vector3(3, 4, 4), function=(1.0, 0.05, 0.01)),
        SceneLightData(LightType.DIRECTIONAL, Vector3(0.3, 0.3, 0.35),
                       direction=Vector3(-0.3, -1, -0.5)),
        SceneLightData(LightType.SPOT, Vector3(0.9, 0.7, 0.5),
                       position=Vector3(-3, 4, 2), direction=Vector3(0.6, -1, -0.4),
                       function=(1.0, 0.0, 0.0), angle=math.radians(30),
                       penumbra=math.radians(10)),
    ]
    camera = SceneCameraData(
        position=Vector3(0, 1.5, 7),
        look=Vector3(0, -0.3, -1),
        up=Vector3(0, 1, 0),
        height_angle=math.radians(40),
    )
    render_data = RenderData(SceneGlobalData(ka=0.5, kd=0.5, ks=0.5), camera, lights, shapes)

    textures = TextureLibrary()
    textures.add(DEMO_TEXTURE, checker_texture())
    return render_data, textures


def show_preview(image: np.ndarray, title: str):
    """Displays the rendered buffer in a pygame window until it is closed."""
    pygame.init()
    try:
        height, width = image.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3).
        surface = pygame.surfarray.make_surface(image[:, :, :3].swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def save_image(image: np.ndarray, path: str):
    """Writes the RGBA buffer, dropping alpha for formats that cannot store it."""
    rgba = Image.fromarray(image)
    try:
        rgba.save(path)
    except OSError:
        # JPEG and similar formats reject RGBA.
        rgba.convert("RGB").save(path)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a scene with the Phong ray tracer.")
    parser.add_argument("scene", nargs="?", help="JSON scene file (omit with --demo)")
    parser.add_argument("-o", "--output", default="output.png", help="output image path")
    parser.add_argument("--width", type=int, default=512)
    parser.add_argument("--height", type=int, default=384)
    parser.add_argument("--demo", action="store_true", help="render the built-in demo scene")
    parser.add_argument("--no-shadows", action="store_true", help="disable shadow rays")
    parser.add_argument("--no-reflections", action="store_true", help="disable reflection rays")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if not args.demo and args.scene is None:
        parser.error("a scene file is required unless --demo is given")
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.demo:
            render_data, textures = create_demo_scene()
        else:
            render_data = load_scene(args.scene)
            textures = TextureLibrary(root=os.path.dirname(os.path.abspath(args.scene)))
        scene = RayTraceScene(args.width, args.height, render_data, textures)
    except (OSError, ValueError) as e:
        logger.error("Could not build scene: %s", e)
        return 1

    config = Config(
        enable_shadow=not args.no_shadows,
        enable_reflection=not args.no_reflections,
    )
    image = RayTracer(config).render(scene)

    try:
        save_image(image, args.output)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    logger.info("Saved %s", args.output)

    if args.preview:
        show_preview(image, os.path.basename(args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
