"""The collection of shapes that make up a scene."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import List, Tuple

from .geometry import Shape, Sphere, Triangle


class SceneObjects:
    """An ordered container of the shapes a ray is tested against."""

    def __init__(self) -> None:
        self._shapes: List[Shape] = []

    def __repr__(self) -> str:
        return f"SceneObjects({len(self._shapes)} shapes)"

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """The shapes in the order they were added."""
        return tuple(self._shapes)

    def add_triangle(self, triangle: Triangle) -> None:
        """Add a triangle to the scene."""
        self._shapes.append(triangle)

    def add_sphere(self, sphere: Sphere) -> None:
        """Add a sphere to the scene."""
        self._shapes.append(sphere)

    def add_cuboid(self, ldb: Sequence[float], rdb: Sequence[float], rdf: Sequence[float],
                   ldf: Sequence[float], lub: Sequence[float], rub: Sequence[float],
                   ruf: Sequence[float], luf: Sequence[float],
                   d1: Sequence[float], d2: Sequence[float],
                   l1: Sequence[float], l2: Sequence[float],
                   r1: Sequence[float], r2: Sequence[float],
                   b1: Sequence[float], b2: Sequence[float],
                   f1: Sequence[float], f2: Sequence[float],
                   u1: Sequence[float], u2: Sequence[float]) -> None:
        """Add a cuboid as twelve triangles.

        Corner names read left/right, down/up, back/forward. The bottom face
        takes the back colours, so ``d1`` and ``d2`` go unused.
        """
        faces = (
            # Down
            (ldb, rdb, rdf, b1),
            (ldb, ldf, rdf, b2),
            # Up
            (lub, rub, ruf, u1),
            (lub, luf, ruf, u2),
            # Left
            (ldb, lub, luf, l1),
            (ldb, ldf, luf, l2),
            # Right
            (rdb, rub, ruf, r1),
            (rdb, rdf, ruf, r2),
            # Back
            (ldb, rdb, rub, b1),
            (ldb, lub, rub, b2),
            # Forward
            (ldf, rdf, ruf, f1),
            (ldf, luf, ruf, f2),
        )
        for first, second, third, colour in faces:
            self.add_triangle(Triangle(first, second, third, colour))