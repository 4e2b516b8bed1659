# lights/light.py
import math

from core.vector import Vector3
from scene.scenedata import LightType, SceneLightData

BLACK = Vector3(0, 0, 0)


class Light:
    """
    Abstract light source. Lights are immutable after construction and are
    queried at world-space positions.
    """
    def __init__(self, data: SceneLightData):
        self.color = data.color
        self.c1, self.c2, self.c3 = data.function

    def direction_to_light(self, position: Vector3) -> Vector3:
        """Normalized direction from a world-space position toward the light."""
        raise NotImplementedError("direction_to_light() must be implemented by subclasses.")

    def distance_to(self, position: Vector3) -> float:
        raise NotImplementedError("distance_to() must be implemented by subclasses.")

    def color_at(self, position: Vector3) -> Vector3:
        return self.color

    def attenuation(self, distance: float) -> float:
        """min(1, 1 / (c1 + c2*d + c3*d^2)); 1 for an infinitely distant light."""
        if math.isinf(distance):
            return 1.0
        denom = self.c1 + self.c2 * distance + self.c3 * distance * distance
        if denom <= 0:
            return 1.0
        return min(1.0, 1.0 / denom)


class PointLight(Light):
    def __init__(self, data: SceneLightData):
        super().__init__(data)
        self.position = data.position

    def direction_to_light(self, position: Vector3) -> Vector3:
        return (self.position - position).normalize()

    def distance_to(self, position: Vector3) -> float:
        return (self.position - position).length()


class DirectionalLight(Light):
    """
    Light from infinitely far away: the same direction everywhere, no
    attenuation, and any occluder along the shadow ray blocks it.
    """
    def __init__(self, data: SceneLightData):
        super().__init__(data)
        self._to_light = (-data.direction).normalize()

    def direction_to_light(self, position: Vector3) -> Vector3:
        return self._to_light

    def distance_to(self, position: Vector3) -> float:
        return math.inf

    def attenuation(self, distance: float) -> float:
        return 1.0


class SpotLight(PointLight):
    """
    Point light restricted to a cone. Full intensity inside the inner cone
    (angle - penumbra), nothing outside the outer cone (angle), and a smooth
    cubic falloff in between.
    """
    def __init__(self, data: SceneLightData):
        super().__init__(data)
        self.spot_direction = data.direction.normalize()
        self.outer_angle = data.angle
        self.inner_angle = data.angle - data.penumbra

    def falloff(self, theta: float) -> float:
        """0 at the inner cone edge, 1 at the outer edge: -2x^3 + 3x^2."""
        x = (theta - self.inner_angle) / (self.outer_angle - self.inner_angle)
        return -2 * x ** 3 + 3 * x ** 2

    def color_at(self, position: Vector3) -> Vector3:
        to_point = position - self.position
        distance = to_point.length()
        if distance == 0:
            return self.color
        cos_theta = min(max(to_point.dot(self.spot_direction) / distance, -1.0), 1.0)
        theta = math.acos(cos_theta)

        if theta > self.outer_angle:
            return BLACK
        if theta >= self.inner_angle and self.outer_angle > self.inner_angle:
            return self.color * (1 - self.falloff(theta))
        return self.color


_LIGHT_TYPES = {
    LightType.POINT: PointLight,
    LightType.DIRECTIONAL: DirectionalLight,
    LightType.SPOT: SpotLight,
}


def make_light(data: SceneLightData) -> Light:
    try:
        cls = _LIGHT_TYPES[data.type]
    except KeyError:
        raise ValueError(f"Unsupported light type: {data.type!r}") from None
    return cls(data)
