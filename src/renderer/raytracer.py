# renderer/raytracer.py
import logging
import time
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from core.color import BLACK, RGBA, rgba_to_color, to_rgba
from core.ray import Ray
from core.vector import Vector3
from geometry.world import find_nearest_hit
from materials.material import Material
from renderer.config import Config
from scene.scene import RayTraceScene

logger = logging.getLogger(__name__)

MAX_RECURSION_DEPTH = 4
# Offsets that move secondary ray origins off the surface they start on.
SHADOW_EPSILON = 1e-3
REFLECTION_EPSILON = 1e-4


class TraceMode(Enum):
    PRIMARY = "primary"
    # Only records the nearest hit on the ray; no shading, no recursion.
    SHADOW_PROBE = "shadow_probe"


class RayTracer:
    """
    Whitted-style CPU ray tracer: one primary ray per pixel center, Phong
    shading with hard shadows, and a single mirror-reflection branch per hit
    down to max_recursion_depth.

    Every pixel is a pure function of the read-only scene, so rows can be
    rendered independently with render_rows().
    """
    def __init__(self, config: Optional[Config] = None,
                 max_recursion_depth: int = MAX_RECURSION_DEPTH):
        self.config = config if config is not None else Config()
        self.max_recursion_depth = max_recursion_depth

    def render(self, scene: RayTraceScene) -> np.ndarray:
        """
        Renders the scene into an 8-bit RGBA buffer of shape (height, width, 4),
        row 0 at the top.
        """
        inert = self.config.inert_features_requested()
        if inert:
            logger.warning("Ignoring unimplemented features: %s", ", ".join(inert))

        logger.info("Rendering %dx%d (shadows=%s, reflection=%s, max depth=%d)",
                    scene.width, scene.height, self.config.enable_shadow,
                    self.config.enable_reflection, self.max_recursion_depth)
        start_time = time.time()

        image = self.render_rows(scene, range(scene.height))

        logger.info("Rendered in %.2fs", time.time() - start_time)
        return image

    def render_rows(self, scene: RayTraceScene, rows: Iterable[int]) -> np.ndarray:
        """Renders the given image rows into a (len(rows), width, 4) buffer."""
        rows = list(rows)
        out = np.zeros((len(rows), scene.width, 4), dtype=np.uint8)
        for i, row in enumerate(rows):
            for col in range(scene.width):
                out[i, col] = self.trace_ray(self.primary_ray(scene, row, col), scene)
        return out

    def primary_ray(self, scene: RayTraceScene, row: int, col: int) -> Ray:
        """World-space ray from the eye through the center of pixel (row, col)."""
        camera = scene.camera
        # The eye sits at the camera-space origin, so the view-plane point is the direction.
        direction = camera.camera_to_world(camera.view_plane_point(row, col, 1.0))
        return Ray(camera.position, direction)

    def trace_ray(self, ray: Ray, scene: RayTraceScene, depth: int = 0,
                  mode: TraceMode = TraceMode.PRIMARY) -> RGBA:
        """
        Finds the nearest hit of a world-space ray and shades it. The hit
        distance is left on ray.t_hit. Misses and SHADOW_PROBE traces return black.
        """
        hit = find_nearest_hit(ray, scene.primitives)
        if mode is TraceMode.SHADOW_PROBE or hit is None:
            return BLACK

        primitive = hit.primitive
        return self.phong(
            ray.intersection_point(),
            primitive.world_normal(hit.object_point),
            -ray.direction,
            primitive.material,
            primitive.texture_color(hit.object_point),
            scene,
            depth,
        )

    def is_occluded(self, position: Vector3, direction_to_light: Vector3,
                    distance_to_light: float, scene: RayTraceScene) -> bool:
        shadow_ray = Ray(position + direction_to_light * SHADOW_EPSILON, direction_to_light)
        self.trace_ray(shadow_ray, scene, mode=TraceMode.SHADOW_PROBE)
        return shadow_ray.t_hit < distance_to_light

    def phong(self, position: Vector3, normal: Vector3, direction_to_camera: Vector3,
              material: Material, texture_color: Vector3, scene: RayTraceScene,
              depth: int) -> RGBA:
        """
        Phong illumination at a world-space surface point:

            ka*Oa + sum over visible lights of
                f_att * I * ([blend*T + (1-blend)*kd*Od] * (N.L) + ks*Os * max(0, R.V)^n)
            + ks*Or * reflected color

        Occluded lights contribute nothing. The reflection term recurses once,
        until max_recursion_depth is reached.
        """
        normal = normal.normalize()
        direction_to_camera = direction_to_camera.normalize()
        g = scene.global_data

        illumination = material.ambient * g.ka

        diffuse_color = (texture_color * material.blend +
                         material.diffuse * (g.kd * (1 - material.blend)))
        specular_color = material.specular * g.ks

        for light in scene.lights:
            direction_to_light = light.direction_to_light(position)
            distance_to_light = light.distance_to(position)

            if self.config.enable_shadow and self.is_occluded(
                    position, direction_to_light, distance_to_light, scene):
                continue

            n_dot_l = normal.dot(direction_to_light)
            if n_dot_l <= 0:
                continue

            light_color = light.color_at(position)
            f_att = light.attenuation(distance_to_light)

            illumination = illumination + light_color * diffuse_color * (f_att * n_dot_l)

            reflected_light = (-direction_to_light).reflect(normal)
            r_dot_v = max(0.0, reflected_light.dot(direction_to_camera))
            illumination = illumination + (
                light_color * specular_color * (f_att * r_dot_v ** material.shininess))

        if self.config.enable_reflection and depth < self.max_recursion_depth:
            reflected_view = (-direction_to_camera).reflect(normal)
            reflection_ray = Ray(position + reflected_view * REFLECTION_EPSILON, reflected_view)
            reflected_color = rgba_to_color(self.trace_ray(reflection_ray, scene, depth + 1))
            illumination = illumination + material.reflective * g.ks * reflected_color

        return to_rgba(illumination)
