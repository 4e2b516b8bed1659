# materials/texture_loader.py
import logging
import os
from typing import Dict, Iterable, Optional

from PIL import Image, UnidentifiedImageError

from materials.material import TextureMap
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to RGBA.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            texture = ImageTexture.from_image(img, image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture


class TextureLibrary:
    """
    Filename-keyed store of loaded textures. Each file is loaded once, then
    shared by reference between every primitive that uses it. Built before
    rendering and never mutated while rendering.
    """
    def __init__(self, root: Optional[str] = None):
        self.root = root
        self._textures: Dict[str, ImageTexture] = {}

    def _resolve(self, filename: str) -> str:
        if self.root is None or os.path.isabs(filename):
            return filename
        return os.path.join(self.root, filename)

    def add(self, filename: str, texture: ImageTexture) -> None:
        self._textures[filename] = texture

    def load(self, texture_map: TextureMap) -> Optional[ImageTexture]:
        """Returns the shared texture for the map, loading it on first use."""
        if not texture_map.is_used:
            return None
        filename = texture_map.filename
        if filename not in self._textures:
            self._textures[filename] = load_texture(self._resolve(filename))
        return self._textures[filename]

    def load_all(self, texture_maps: Iterable[TextureMap]) -> None:
        for texture_map in texture_maps:
            self.load(texture_map)
        logger.info("Texture library holds %d texture(s)", len(self._textures))

    def get(self, texture_map: TextureMap) -> Optional[ImageTexture]:
        if not texture_map.is_used:
            return None
        return self._textures.get(texture_map.filename)

    def __contains__(self, filename: str) -> bool:
        return filename in self._textures

    def __len__(self) -> int:
        return len(self._textures)
