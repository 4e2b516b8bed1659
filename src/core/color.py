# core/color.py
from typing import NamedTuple

from core.vector import Vector3


class RGBA(NamedTuple):
    """An 8-bit per channel color. Rendered pixels are always opaque."""
    r: int
    g: int
    b: int
    a: int = 255


BLACK = RGBA(0, 0, 0)


def to_rgba(illumination: Vector3) -> RGBA:
    """
    Converts floating-point illumination to an opaque 8-bit color by clamping
    each channel to [0,1] and scaling by 255.
    """
    c = illumination.clamp(0.0, 1.0)
    return RGBA(int(255 * c.x), int(255 * c.y), int(255 * c.z))


def rgba_to_color(color: RGBA) -> Vector3:
    """Maps an 8-bit color back to [0,1] floats (alpha is dropped)."""
    return Vector3(color.r / 255.0, color.g / 255.0, color.b / 255.0)
