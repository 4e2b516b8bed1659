"""Tests for point, directional and spot lights."""

import math

import pytest

from core.vector import Vector3
from lights.light import DirectionalLight, PointLight, SpotLight, make_light
from scene.scenedata import LightType, SceneLightData

WHITE = Vector3(1, 1, 1)


def point_light(position=(0, 0, 0), function=(1.0, 0.0, 0.0)):
    return PointLight(SceneLightData(LightType.POINT, WHITE, position=Vector3(*position),
                                     function=function))


class TestAttenuation:

    def test_constant_attenuation_is_one(self):
        assert point_light().attenuation(10.0) == 1.0

    def test_capped_at_one(self):
        light = point_light(function=(0.1, 0.0, 0.0))
        assert light.attenuation(1.0) == 1.0

    def test_quadratic_falloff(self):
        light = point_light(function=(0.0, 0.0, 1.0))
        assert light.attenuation(4.0) == pytest.approx(1 / 16)

    def test_non_positive_denominator(self):
        light = point_light(function=(0.0, 0.0, 0.0))
        assert light.attenuation(3.0) == 1.0


class TestPointLight:

    def test_direction_and_distance(self):
        light = point_light((0, 4, 0))
        assert light.direction_to_light(Vector3(0, 1, 0)) == Vector3(0, 1, 0)
        assert light.distance_to(Vector3(0, 1, 0)) == pytest.approx(3.0)


class TestDirectionalLight:

    def test_constant_direction_and_infinite_distance(self):
        light = DirectionalLight(SceneLightData(LightType.DIRECTIONAL, WHITE,
                                                direction=Vector3(0, -2, 0),
                                                function=(0.0, 0.0, 5.0)))
        for position in (Vector3(0, 0, 0), Vector3(10, -3, 7)):
            assert light.direction_to_light(position) == Vector3(0, 1, 0)
            assert math.isinf(light.distance_to(position))
        assert light.attenuation(math.inf) == 1.0


class TestSpotLight:

    @pytest.fixture
    def spot(self):
        return SpotLight(SceneLightData(
            LightType.SPOT, WHITE,
            position=Vector3(0, 0, 0),
            direction=Vector3(0, -1, 0),
            angle=math.radians(30),
            penumbra=math.radians(10),
        ))

    @staticmethod
    def below_at(angle_degrees):
        a = math.radians(angle_degrees)
        return Vector3(math.sin(a), -math.cos(a), 0) * 5

    def test_full_intensity_inside_inner_cone(self, spot):
        assert spot.color_at(self.below_at(0)) == WHITE
        assert spot.color_at(self.below_at(15)) == WHITE

    def test_dark_outside_outer_cone(self, spot):
        assert spot.color_at(self.below_at(35)) == Vector3(0, 0, 0)
        assert spot.color_at(Vector3(0, 5, 0)) == Vector3(0, 0, 0)

    def test_smooth_falloff_in_penumbra(self, spot):
        assert spot.falloff(math.radians(20)) == pytest.approx(0.0)
        assert spot.falloff(math.radians(25)) == pytest.approx(0.5)
        assert spot.falloff(math.radians(30)) == pytest.approx(1.0)
        assert spot.color_at(self.below_at(25)).is_close(WHITE * 0.5)

    def test_zero_penumbra_is_hard_edged(self):
        spot = SpotLight(SceneLightData(LightType.SPOT, WHITE, direction=Vector3(0, -1, 0),
                                        angle=math.radians(30)))
        assert spot.color_at(self.below_at(29)) == WHITE
        assert spot.color_at(self.below_at(31)) == Vector3(0, 0, 0)

    def test_is_positional(self, spot):
        assert spot.distance_to(Vector3(0, -5, 0)) == pytest.approx(5.0)
        assert spot.direction_to_light(Vector3(0, -5, 0)) == Vector3(0, 1, 0)


@pytest.mark.parametrize("light_type,cls", [
    (LightType.POINT, PointLight),
    (LightType.DIRECTIONAL, DirectionalLight),
    (LightType.SPOT, SpotLight),
])
def test_make_light(light_type, cls):
    assert type(make_light(SceneLightData(light_type, WHITE))) is cls
