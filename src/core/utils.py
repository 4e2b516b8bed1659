# core/utils.py
import math

import numpy as np
from numba import njit

from core.vector import Vector3

INFINITY = math.inf
PARALLEL_EPSILON = 1e-12


@njit(cache=True)
def solve_quadratic(a, b, c):
    """
    Returns both roots (t1 <= t2 when a > 0) of a*t^2 + b*t + c = 0, or
    (inf, inf) when there is no real root. When the quadratic term vanishes the
    single linear root is returned twice.
    """
    if abs(a) < 1e-12:
        if abs(b) < 1e-12:
            return np.inf, np.inf
        t = -c / b
        return t, t
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return np.inf, np.inf
    sqrt_disc = math.sqrt(discriminant)
    return (-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)


@njit(cache=True)
def _in_front(t):
    if t <= 0.0:
        return np.inf
    return t


@njit(cache=True)
def _root_in_band(t, oy, dy, y_min, y_max):
    """t if it is in front of the origin and r(t).y lies in [y_min, y_max], else inf."""
    if t <= 0.0 or t == np.inf:
        return np.inf
    y = oy + t * dy
    if y < y_min or y > y_max:
        return np.inf
    return t


@njit(cache=True)
def sphere_hit(ox, oy, oz, dx, dy, dz, radius):
    """Nearest positive t where the ray meets |p|^2 = radius^2, or inf."""
    a = dx * dx + dy * dy + dz * dz
    b = 2.0 * (ox * dx + oy * dy + oz * dz)
    c = ox * ox + oy * oy + oz * oz - radius * radius
    t1, t2 = solve_quadratic(a, b, c)
    return min(_in_front(t1), _in_front(t2))


@njit(cache=True)
def cylinder_lateral_hit(ox, oy, oz, dx, dy, dz, radius, half_height):
    """
    Nearest positive t on the side of the cylinder x^2 + z^2 = radius^2 with
    |y| <= half_height, or inf. Rays parallel to the axis never hit the side.
    """
    a = dx * dx + dz * dz
    if a <= 0.0:
        return np.inf
    b = 2.0 * (ox * dx + oz * dz)
    c = ox * ox + oz * oz - radius * radius
    t1, t2 = solve_quadratic(a, b, c)
    t1 = _root_in_band(t1, oy, dy, -half_height, half_height)
    t2 = _root_in_band(t2, oy, dy, -half_height, half_height)
    return min(t1, t2)


@njit(cache=True)
def cone_lateral_hit(ox, oy, oz, dx, dy, dz, slope_sq, half_height):
    """
    Nearest positive t on x^2 + z^2 = k*(h/2 - y)^2 with |y| <= h/2, or inf.
    Both roots are bounds-checked since the nearer one may lie on the mirrored
    nappe above the apex.
    """
    apex_offset = half_height - oy
    a = dx * dx + dz * dz - slope_sq * dy * dy
    b = 2.0 * (ox * dx + oz * dz) + 2.0 * slope_sq * dy * apex_offset
    c = ox * ox + oz * oz - slope_sq * apex_offset * apex_offset
    t1, t2 = solve_quadratic(a, b, c)
    t1 = _root_in_band(t1, oy, dy, -half_height, half_height)
    t2 = _root_in_band(t2, oy, dy, -half_height, half_height)
    return min(t1, t2)


def smallest_positive(*candidates: float) -> float:
    """
    Returns the smallest strictly positive candidate, or +infinity. Roots at or
    behind the ray origin are discarded.
    """
    best = INFINITY
    for t in candidates:
        if 0 < t < best:
            best = t
    return best


def intersect_axis_plane(origin: Vector3, direction: Vector3, axis: int, offset: float) -> float:
    """
    Intersects r(t) = origin + t*direction with the plane {p : p[axis] = offset}.
    Returns the positive t, or +infinity when the ray is parallel to the plane or
    the plane lies behind the origin.
    """
    d = direction[axis]
    if abs(d) < PARALLEL_EPSILON:
        return INFINITY
    t = (offset - origin[axis]) / d
    return t if t > 0 else INFINITY


def circle_u(a: float, b: float) -> float:
    """
    Fraction of the circle perimeter swept to reach (a, b), where a is the
    horizontal axis and b points downward when seen from above. Result is in [0,1].
    """
    theta = math.atan2(b, a)
    if theta < 0:
        return -theta / (2 * math.pi)
    return 1 - theta / (2 * math.pi)
