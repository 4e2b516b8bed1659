"""Tests for vectors, rays, transforms, root finders and color conversion."""

import math

import numpy as np
import pytest

from core.color import RGBA, rgba_to_color, to_rgba
from core.ray import Ray
from core.transform import Transform, rotation, scaling, translation
from core.utils import (circle_u, cone_lateral_hit, cylinder_lateral_hit, intersect_axis_plane,
                        smallest_positive, solve_quadratic, sphere_hit)
from core.uv import UV
from core.vector import Vector3


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert -a == Vector3(-1, -2, -3)

    def test_dot_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)
        assert Vector3(3, 0, 4).normalize().is_close(Vector3(0.6, 0, 0.8))

    def test_reflect(self):
        reflected = Vector3(1, -1, 0).reflect(Vector3(0, 1, 0))
        assert reflected == Vector3(1, 1, 0)

    def test_clamp(self):
        assert Vector3(-1, 0.5, 2).clamp() == Vector3(0, 0.5, 1)


class TestRay:

    def test_at(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert ray.at(2) == Vector3(0, 0, 3)

    def test_starts_without_intersection(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
        assert math.isinf(ray.t_hit)
        assert not ray.has_intersection()
        with pytest.raises(ValueError):
            ray.intersection_point()

    def test_record_intersection(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        ray.record_intersection(4.5)
        assert ray.has_intersection()
        assert ray.intersection_point() == Vector3(0, 0, 0.5)


class TestTransform:

    def test_round_trip_point_and_direction(self):
        transform = Transform(
            translation(Vector3(1, -2, 3))
            @ rotation(Vector3(1, 1, 0), math.radians(40))
            @ scaling(Vector3(2, 0.5, 3))
        )
        p = Vector3(0.3, -0.7, 1.1)
        for is_vector in (False, True):
            back = transform.apply_inverse(transform.apply(p, is_vector), is_vector)
            assert back.is_close(p, 1e-9)

    def test_directions_ignore_translation(self):
        transform = Transform(translation(Vector3(10, 0, 0)))
        assert transform.apply(Vector3(0, 0, 1), True) == Vector3(0, 0, 1)
        assert transform.apply(Vector3(0, 0, 1), False) == Vector3(10, 0, 1)

    def test_rotation_is_right_handed(self):
        transform = Transform(rotation(Vector3(0, 0, 1), math.pi / 2))
        assert transform.apply(Vector3(1, 0, 0), True).is_close(Vector3(0, 1, 0))

    def test_normal_matrix_under_non_uniform_scale(self):
        transform = Transform(scaling(Vector3(2, 1, 1)))
        n = transform.apply_normal(Vector3(1, 1, 0)).normalize()
        assert n.is_close(Vector3(1, 2, 0).normalize())

    def test_singular_matrix_rejected(self):
        with pytest.raises(ValueError):
            Transform(scaling(Vector3(1, 0, 1)))

    def test_matrices_are_read_only(self):
        transform = Transform(np.identity(4))
        with pytest.raises(ValueError):
            transform.inverse[0, 0] = 2.0


class TestRootFinding:

    def test_two_roots(self):
        t1, t2 = solve_quadratic(1.0, -3.0, 2.0)
        assert (t1, t2) == pytest.approx((1.0, 2.0))

    def test_no_real_roots(self):
        assert solve_quadratic(1.0, 0.0, 1.0) == (math.inf, math.inf)

    def test_linear_degenerate_case(self):
        assert solve_quadratic(0.0, 2.0, -4.0) == pytest.approx((2.0, 2.0))
        assert solve_quadratic(0.0, 0.0, 1.0) == (math.inf, math.inf)

    def test_smallest_positive_discards_non_positive(self):
        assert smallest_positive(-1.0, 0.0, 3.0, 2.0) == 2.0
        assert smallest_positive(-1.0, 0.0) == math.inf
        assert smallest_positive() == math.inf

    def test_plane_parallel_or_behind(self):
        origin = Vector3(0, 0, 5)
        assert intersect_axis_plane(origin, Vector3(1, 0, 0), 2, 0.5) == math.inf
        assert intersect_axis_plane(origin, Vector3(0, 0, 1), 2, 0.5) == math.inf
        assert intersect_axis_plane(origin, Vector3(0, 0, -1), 2, 0.5) == pytest.approx(4.5)

    def test_circle_u_range(self):
        for angle in np.linspace(-math.pi, math.pi, 17):
            u = circle_u(math.cos(angle), math.sin(angle))
            assert 0.0 <= u <= 1.0
        assert circle_u(0, -1) == pytest.approx(0.25)
        assert circle_u(-1, 0) == pytest.approx(0.5)


class TestQuadricKernels:

    def test_sphere_hit_from_outside_and_inside(self):
        assert sphere_hit(0.0, 0.0, 5.0, 0.0, 0.0, -1.0, 0.5) == pytest.approx(4.5)
        assert sphere_hit(0.0, 0.0, 0.0, 0.0, 0.0, -1.0, 0.5) == pytest.approx(0.5)
        assert sphere_hit(0.0, 0.0, 5.0, 0.0, 0.0, 1.0, 0.5) == math.inf

    def test_cylinder_side_respects_height_band(self):
        assert cylinder_lateral_hit(0.0, 0.0, 5.0, 0.0, 0.0, -1.0, 0.5, 0.5) == pytest.approx(4.5)
        assert cylinder_lateral_hit(0.0, 2.0, 5.0, 0.0, 0.0, -1.0, 0.5, 0.5) == math.inf
        # Parallel to the axis.
        assert cylinder_lateral_hit(0.2, 5.0, 0.0, 0.0, -1.0, 0.0, 0.5, 0.5) == math.inf

    def test_cone_side_skips_mirrored_nappe(self):
        assert cone_lateral_hit(0.0, 0.0, 5.0, 0.0, 0.0, -1.0, 0.25, 0.5) == pytest.approx(4.75)
        assert cone_lateral_hit(0.0, 1.5, 5.0, 0.0, 0.0, -1.0, 0.25, 0.5) == math.inf


class TestColor:

    def test_to_rgba_clamps_and_is_opaque(self):
        assert to_rgba(Vector3(2.0, -1.0, 0.5)) == RGBA(255, 0, 127, 255)

    def test_rgba_to_color(self):
        assert rgba_to_color(RGBA(255, 0, 51)).is_close(Vector3(1.0, 0.0, 0.2))

    def test_uv_clamp(self):
        uv = UV(-0.0001, 1.0002).clamp()
        assert (uv.u, uv.v) == (0.0, 1.0)

    def test_uv_is_a_plain_coordinate_pair(self):
        with pytest.raises(TypeError):
            UV(0.1, 0.2) + UV(0.3, 0.4)
