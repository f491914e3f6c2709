"""Shapes a ray can hit: spheres and triangles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Tuple

from .colour import BasicColour
from .vectors import (
    Line,
    Plane,
    Vector,
    add,
    cross,
    dot,
    line_intersects_plane,
    magnitude,
    normalise,
    point_to_line_distance,
    scale,
    subtract,
)

CUTOFF = 1e-09
SPHERE_TOLERANCE = 1e-07

_ORIGIN: Vector = (0.0, 0.0, 0.0)
_BLACK: BasicColour = (0.0,) * 8


@dataclass
class IntersectionData:
    """What a ray found when tested against a shape.

    ``lam`` is the ray parameter of the hit; it stays at -1 on a miss.
    """

    intersects: bool = False
    lam: float = -1.0
    normal: Vector = _ORIGIN
    point_of_intersection: Vector = _ORIGIN
    colour: BasicColour = _BLACK


class Shape(ABC):
    """Anything that can be tested for intersection with a ray."""

    @abstractmethod
    def check_intersection(self, ray: Line) -> IntersectionData:
        """Return where and how the ray meets this shape."""


class Sphere(Shape):
    """A sphere with a centre, a radius and surface colour properties."""

    def __init__(self, centre: Sequence[float], radius: float,
                 colour: Sequence[float]) -> None:
        self.centre: Vector = tuple(centre)
        self.radius = radius
        self.colour: BasicColour = tuple(colour)

    def __repr__(self) -> str:
        return f"Sphere(centre={self.centre!r}, radius={self.radius!r})"

    def check_intersection(self, ray: Line) -> IntersectionData:
        direction = normalise(ray.direction)
        lam, offset = point_to_line_distance(Line(tuple(ray.point), direction), self.centre)
        distance = magnitude(offset)

        if distance - self.radius < SPHERE_TOLERANCE and lam >= 0.0:
            # Pythagoras along the unit direction gives the entry point.
            lambda_offset = math.sqrt(max(0.0, self.radius ** 2 - distance ** 2))
            hit_lam = lam - lambda_offset
            point = add(ray.point, scale(direction, hit_lam))
            normal = normalise(subtract(point, self.centre))
            return IntersectionData(
                intersects=True,
                lam=hit_lam,
                normal=normal,
                point_of_intersection=point,
                colour=self.colour,
            )
        return IntersectionData()


def _zero_count(vec: Sequence[float]) -> int:
    return sum(1 for coef in vec if abs(coef) < CUTOFF)


def _choose_vectors(corners: Tuple[Vector, Vector, Vector]
                    ) -> Tuple[int, Tuple[Vector, Vector], Tuple[int, int]]:
    """Pick the edge vectors and coordinate pair used for barycentric solving.

    At least one of the chosen edges is parallel to no axis, so some pair of
    coordinates gives a non-zero denominator unless the corners are collinear.
    """
    ab = subtract(corners[1], corners[0])
    ac = subtract(corners[2], corners[0])
    ca = subtract(corners[0], corners[2])
    cb = subtract(corners[1], corners[2])

    if _zero_count(ab) < 2:
        origin_index, vectors = 0, (ab, ac)
    elif _zero_count(ac) < 2:
        origin_index, vectors = 0, (ac, ab)
    else:
        origin_index, vectors = 2, (cb, ca)

    first, second = vectors
    if abs(first[0]) < CUTOFF and abs(second[0]) < CUTOFF:
        indexes = (1, 2)
    elif abs(first[1]) < CUTOFF and abs(second[1]) < CUTOFF:
        indexes = (0, 2)
    else:
        indexes = (0, 1)
    return origin_index, vectors, indexes


class Triangle(Shape):
    """A flat triangle given by three corners."""

    def __init__(self, v1: Sequence[float], v2: Sequence[float], v3: Sequence[float],
                 colour: Sequence[float]) -> None:
        self.corners: Tuple[Vector, Vector, Vector] = (tuple(v1), tuple(v2), tuple(v3))
        self.colour: BasicColour = tuple(colour)
        self._origin_index, self.vectors, self._baryc_indexes = _choose_vectors(self.corners)
        normal = cross(self.vectors[0], self.vectors[1])
        self.plane = Plane(normal, dot(normal, self.corners[1]))

    def __repr__(self) -> str:
        return f"Triangle(corners={self.corners!r})"

    def check_intersection(self, ray: Line) -> IntersectionData:
        hit = line_intersects_plane(ray, self.plane)
        if hit is None or hit[0] < 0:
            return IntersectionData()
        lam, point = hit

        i1, i2 = self._baryc_indexes
        origin = self.corners[self._origin_index]
        a, b = self.vectors

        # Solve origin + u*b + v*a = point in the two chosen coordinates.
        denominator = b[i2] * a[i1] - b[i1] * a[i2]
        if denominator == 0 or a[i1] == 0:
            return IntersectionData()
        u = (point[i2] * a[i1] - point[i1] * a[i2]
             - origin[i2] * a[i1] + origin[i1] * a[i2]) / denominator
        v = (point[i1] - origin[i1] - u * b[i1]) / a[i1]

        inside_quad = -CUTOFF < u < 1 + CUTOFF and -CUTOFF < v < 1 + CUTOFF
        if inside_quad and u + v < 1 + CUTOFF:
            return IntersectionData(
                intersects=True,
                lam=lam,
                normal=self.plane.normal,
                point_of_intersection=point,
                colour=self.colour,
            )
        return IntersectionData()