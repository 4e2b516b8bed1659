# camera/camera.py
import logging
import math

from core.vector import Vector3
from scene.scenedata import SceneCameraData

logger = logging.getLogger(__name__)

DEGENERATE_EPSILON = 1e-8
_FALLBACK_UPS = (Vector3(0, 1, 0), Vector3(0, 0, 1), Vector3(1, 0, 0))


class Camera:
    """
    Pinhole camera. Camera space has the eye at the origin looking down -w,
    with u to the right and v up; world-space rays are built from that basis.
    """
    def __init__(self, data: SceneCameraData, width: int, height: int):
        self.position = data.position
        self.look = data.look
        self.up = data.up
        self.aspect_ratio = width / height
        self.height_angle = data.height_angle
        # Horizontal field of view scales the vertical one by the aspect ratio.
        self.width_angle = self.height_angle * self.aspect_ratio
        self.aperture = data.aperture
        self.focal_length = data.focal_length
        self.width = width
        self.height = height
        self.update_camera()

    def update_camera(self):
        """Builds the orthonormal (u, v, w) basis from the look and up vectors."""
        self.w = (-self.look).normalize()
        vertical = self._orthogonal_up(self.up)
        if vertical.length() < DEGENERATE_EPSILON:
            # up is parallel to look: use the world axis least aligned with w.
            fallback = min(_FALLBACK_UPS, key=lambda axis: abs(axis.dot(self.w)))
            logger.warning("Camera up vector %s is parallel to look %s; using %s instead",
                           self.up, self.look, fallback)
            vertical = self._orthogonal_up(fallback)
        self.v = vertical.normalize()
        self.u = self.v.cross(self.w)

        self.viewplane_width = 2 * math.tan(self.width_angle / 2)
        self.viewplane_height = 2 * math.tan(self.height_angle / 2)

    def _orthogonal_up(self, up: Vector3) -> Vector3:
        return up - self.w * up.dot(self.w)

    def view_plane_point(self, row: int, col: int, k: float = 1.0) -> Vector3:
        """
        Camera-space position of a pixel center on the view plane at depth k.
        Row 0 is the top of the image; the plane center is the look direction.
        """
        x = (col + 0.5) / self.width - 0.5
        y = (self.height - row - 0.5) / self.height - 0.5
        return Vector3(x * k * self.viewplane_width, y * k * self.viewplane_height, -k)

    def camera_to_world(self, direction: Vector3) -> Vector3:
        """Rotates a camera-space direction into world space."""
        return self.u * direction.x + self.v * direction.y + self.w * direction.z
