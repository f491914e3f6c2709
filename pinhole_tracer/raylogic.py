"""How a ray leaves a surface it has hit."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .vectors import Line, add, dot, normalise, scale, subtract

BIAS = 1e-09
EPSILON = 1e-07


def calculate_new_ray_direction(ray: Line, p_of_i: Sequence[float], normal: Sequence[float],
                                object_colour: Sequence[float],
                                rand_gen: random.Random) -> Line:
    """Bounce a ray off a surface.

    The outgoing direction blends a random diffuse direction with the mirror
    reflection, weighted by the surface gloss (channel 7 of the colour). The
    new ray starts a hair above the surface on the side the ray came from.
    """
    ray_dir = tuple(ray.direction)

    facing = scale(normal, -1.0) if dot(ray_dir, normal) > 0 else tuple(normal)
    facing = normalise(facing)

    diffuse = tuple(rand_gen.uniform(-1.0, 1.0) for _ in range(3))
    if dot(diffuse, facing) < 0:
        diffuse = scale(diffuse, -1)
    diffuse = normalise(diffuse)

    specular = subtract(ray_dir, scale(facing, 2 * dot(facing, ray_dir)))
    if not dot(specular, facing) > EPSILON:
        specular = scale(specular, -1)
    specular = normalise(specular)

    bounce = normalise(add(diffuse, scale(subtract(specular, diffuse), object_colour[7])))
    return Line(add(p_of_i, scale(facing, BIAS)), bounce)