"""Vector algebra on tuples of numbers, with lines and planes in 3D."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import NamedTuple, Optional, Tuple

PI = math.pi
EPSILON = 1e-09

Vector = Tuple[float, ...]


class Line(NamedTuple):
    """A line given by a point on it and a direction."""

    point: Vector
    direction: Vector


class Plane(NamedTuple):
    """A plane given by its normal ``n`` and constant ``d`` with ``r . n = d``."""

    normal: Vector
    d: float


def _elementwise(a: Sequence[float], b: Sequence[float],
                 op: Callable[[float, float], float]) -> Vector:
    """Apply ``op`` pairwise; trailing entries of the longer vector pass through."""
    shared = min(len(a), len(b))
    longer = a if len(a) > len(b) else b
    return tuple(op(x, y) for x, y in zip(a, b)) + tuple(longer[shared:])


def _divide_values(x: float, y: float) -> float:
    if isinstance(x, int) and isinstance(y, int):
        quotient = abs(x) // abs(y)
        return quotient if (x < 0) == (y < 0) else -quotient
    return x / y


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Sum of two vectors, the result as long as the longer one."""
    return _elementwise(a, b, lambda x, y: x + y)


def subtract(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Difference ``a - b``, the result as long as the longer one."""
    return _elementwise(a, b, lambda x, y: x - y)


def multiply(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise product, the result as long as the longer one."""
    return _elementwise(a, b, lambda x, y: x * y)


def divide(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Element-wise quotient ``a / b``; integers divide truncating toward zero."""
    return _elementwise(a, b, _divide_values)


def vector_distance(vec1: Sequence[float], vec2: Sequence[float]) -> Vector:
    """The vector leading from ``vec1`` to ``vec2``."""
    return subtract(vec2, vec1)


def are_vectors_equal(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True when both vectors have the same length and agree within 1e-9."""
    if len(v1) != len(v2):
        return False
    return all(abs(c1 - c2) < EPSILON for c1, c2 in zip(v1, v2))


def scale(vec: Sequence[float], scale_factor: float) -> Vector:
    """Every component multiplied by ``scale_factor``."""
    return tuple(coef * scale_factor for coef in vec)


def magnitude_squared(vec: Sequence[float]) -> float:
    """Sum of the squared components."""
    return sum(coef * coef for coef in vec)


def magnitude(vec: Sequence[float]) -> float:
    """Euclidean length of the vector."""
    return math.sqrt(magnitude_squared(vec))


def scalar_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return magnitude(vector_distance(vec1, vec2))


def normalise(vec: Sequence[float]) -> Vector:
    """The vector scaled to unit length; a zero vector gives NaN components."""
    mag = magnitude(vec)
    if mag == 0:
        return tuple(math.nan for _ in vec)
    return tuple(value / mag for value in vec)


def as_abs(vec: Sequence[float]) -> Vector:
    """Absolute value of each component."""
    return tuple(abs(value) for value in vec)


def dot(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Scalar product."""
    return sum(v1 * v2 for v1, v2 in zip(vec1, vec2))


def cross(vec1: Sequence[float], vec2: Sequence[float]) -> Vector:
    """Cross product of two 3D vectors."""
    a0, a1, a2 = vec1[0], vec1[1], vec1[2]
    b0, b1, b2 = vec2[0], vec2[1], vec2[2]
    return (
        a1 * b2 - a2 * b1,
        -1 * (a0 * b2 - a2 * b0),
        a0 * b1 - a1 * b0,
    )


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def line_intersects_plane(line: Line, plane: Plane) -> Optional[Tuple[float, Vector]]:
    """Return ``(lambda, point)`` where the line meets the plane, or None if parallel."""
    point, direction = line
    normal, d = plane
    discriminant = dot(normal, direction)
    if abs(discriminant) < EPSILON:
        return None
    lam = (d - dot(normal, point)) / discriminant
    return lam, add(point, scale(direction, lam))


def is_point_on_plane(point: Sequence[float], plane: Plane) -> bool:
    """True when the point lies on the plane, within 1e-9."""
    result = line_intersects_plane(Line(tuple(point), tuple(plane.normal)), plane)
    if result is None:
        return False
    return abs(result[0]) < EPSILON


def angle_between_lines(v1: Sequence[float], v2: Sequence[float],
                        wants_acute: bool = True) -> float:
    """The acute angle between two directions, or its obtuse supplement."""
    dot_product = dot(v1, v2)
    if dot_product < 0:
        dot_product = dot(v1, scale(v2, -1))
    acute_angle = _clamped_acos(dot_product / (magnitude(v1) * magnitude(v2)))
    return acute_angle if wants_acute else PI - acute_angle


def point_to_line_distance(line: Line, point: Sequence[float]) -> Tuple[float, Vector]:
    """Return ``(lambda, offset)`` relating the line's closest point to ``point``."""
    origin, direction = line
    determinant = magnitude(direction) ** 2
    if determinant < EPSILON:
        return 0.0, tuple(0.0 for _ in point)
    lam = (
        direction[0] * (point[0] - origin[0])
        + direction[1] * (point[1] - origin[1])
        + direction[2] * (point[2] - origin[2]) / determinant
    )
    return lam, add(subtract(origin, point), scale(direction, lam))


def angle_between_line_and_plane(line: Line, plane: Plane) -> Optional[float]:
    """Angle between a line and a plane, or None when the line is parallel to it."""
    dot_product = dot(line.direction, plane.normal)
    if abs(dot_product) < EPSILON:
        return None
    cos_angle = dot_product / (magnitude(line.direction) * magnitude(plane.normal))
    angle = _clamped_acos(cos_angle)
    if angle >= PI / 2:
        return angle - PI / 2
    return PI / 2 - angle


def reflect_point_across_plane(point: Sequence[float], plane: Plane) -> Vector:
    """Mirror image of a point in a plane."""
    normal_magnitude = magnitude(plane.normal)
    if abs(normal_magnitude) < EPSILON:
        return tuple(point)
    lam = (plane.d - point[0] - point[1] - point[2]) / normal_magnitude ** 2
    return add(point, scale(plane.normal, 2 * lam))