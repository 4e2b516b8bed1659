# materials/presets.py
from core.vector import Vector3
from materials.material import Material, TextureMap


class PhongPresets:
    """Predefined Phong materials for demo scenes."""

    @staticmethod
    def plastic(color: Vector3) -> Material:
        return Material(
            ambient=color * 0.1,
            diffuse=color,
            specular=Vector3(0.6, 0.6, 0.6),
            shininess=25.0,
        )

    @staticmethod
    def matte(color: Vector3) -> Material:
        return Material(ambient=color * 0.1, diffuse=color)

    @staticmethod
    def chrome() -> Material:
        return Material(
            ambient=Vector3(0.02, 0.02, 0.02),
            diffuse=Vector3(0.1, 0.1, 0.1),
            specular=Vector3(1.0, 1.0, 1.0),
            reflective=Vector3(0.8, 0.8, 0.8),
            shininess=80.0,
        )

    @staticmethod
    def gold() -> Material:
        return Material(
            ambient=Vector3(0.1, 0.08, 0.03),
            diffuse=Vector3(0.75, 0.6, 0.23),
            specular=Vector3(0.63, 0.56, 0.37),
            reflective=Vector3(0.3, 0.25, 0.1),
            shininess=50.0,
        )

    @staticmethod
    def floor() -> Material:
        return Material(
            ambient=Vector3(0.05, 0.05, 0.05),
            diffuse=Vector3(0.6, 0.6, 0.6),
            specular=Vector3(0.2, 0.2, 0.2),
            reflective=Vector3(0.25, 0.25, 0.25),
            shininess=10.0,
        )

    @staticmethod
    def textured(filename: str, blend: float = 1.0, repeat_u: float = 1.0,
                 repeat_v: float = 1.0) -> Material:
        return Material(
            ambient=Vector3(0.05, 0.05, 0.05),
            diffuse=Vector3(0.8, 0.8, 0.8),
            specular=Vector3(0.3, 0.3, 0.3),
            shininess=15.0,
            blend=blend,
            texture_map=TextureMap(filename, True, repeat_u, repeat_v),
        )
