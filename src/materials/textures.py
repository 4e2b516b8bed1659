# materials/textures.py
import math

import numpy as np
from PIL import Image

from core.color import RGBA
from core.uv import UV


class Texture:
    """Base class for all textures."""
    def color_at_uv(self, uv: UV, repeat_u: float = 1.0, repeat_v: float = 1.0) -> RGBA:
        """Sample the texture at normalized UV coordinates."""
        raise NotImplementedError("color_at_uv() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A texture of a single color, mostly useful for tests and placeholders."""
    def __init__(self, color: RGBA):
        self.color = color

    def color_at_uv(self, uv: UV, repeat_u: float = 1.0, repeat_v: float = 1.0) -> RGBA:
        return self.color


class ImageTexture(Texture):
    """
    A texture backed by an RGBA image. Pixel (0,0) is the top-left of the image
    while v=0 is the bottom edge, so rows are flipped on lookup.
    """
    def __init__(self, data: np.ndarray, filename: str = ""):
        if data.ndim != 3 or data.shape[2] != 4:
            raise ValueError(f"Expected an (h, w, 4) RGBA array, got shape {data.shape}")
        self.data = np.ascontiguousarray(data, dtype=np.uint8)
        self.data.setflags(write=False)
        self.height, self.width = self.data.shape[:2]
        self.filename = filename

    @classmethod
    def from_image(cls, image: Image.Image, filename: str = "") -> "ImageTexture":
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        return cls(np.array(image), filename)

    def uv_to_pixel(self, uv: UV, repeat_u: float, repeat_v: float):
        """
        Nearest-pixel lookup with wraparound for repeated textures. Returns
        (row, col), both clipped to the last valid index.
        """
        row = min(int(math.floor((1 - uv.v) * repeat_v * self.height)) % self.height,
                  self.height - 1)
        col = min(int(math.floor(uv.u * repeat_u * self.width)) % self.width,
                  self.width - 1)
        return row, col

    def color_at_uv(self, uv: UV, repeat_u: float = 1.0, repeat_v: float = 1.0) -> RGBA:
        row, col = self.uv_to_pixel(uv, repeat_u, repeat_v)
        r, g, b, a = self.data[row, col]
        return RGBA(int(r), int(g), int(b), int(a))

    def __repr__(self) -> str:
        return f"ImageTexture({self.filename!r}, {self.width}x{self.height})"
