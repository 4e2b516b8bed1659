# renderer/config.py
from dataclasses import dataclass, fields
from typing import List


@dataclass(frozen=True)
class Config:
    """
    Renderer feature toggles. Only shadows and reflection change the image;
    the rest are accepted for compatibility with scene/run settings and have no
    effect in this renderer.
    """
    enable_shadow: bool = True
    enable_reflection: bool = True
    enable_refraction: bool = False
    enable_texture_map: bool = False
    enable_texture_filter: bool = False
    enable_parallelism: bool = False
    enable_super_sample: bool = False
    enable_acceleration: bool = False
    enable_depth_of_field: bool = False

    INERT = (
        "enable_refraction",
        "enable_texture_map",
        "enable_texture_filter",
        "enable_parallelism",
        "enable_super_sample",
        "enable_acceleration",
        "enable_depth_of_field",
    )

    def inert_features_requested(self) -> List[str]:
        return [f.name for f in fields(self) if f.name in self.INERT and getattr(self, f.name)]
