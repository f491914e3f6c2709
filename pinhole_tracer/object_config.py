"""Reading the shapes of a scene from an object configuration file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from os import PathLike
from typing import List, Tuple, Union

from .colour import BasicColour
from .file_reader import ConfigError, filter_desired_lines, generalised_cast, read_file_lines
from .geometry import Sphere, Triangle
from .scene_config import SceneConfig
from .vectors import Vector

SECTION_START = "["
SPHERE_WORDS = 6
SPHERE_NUMBERS = 4
CUBOID_CORNERS = 8
CUBOID_FACES = 6
CUBOID_SPAN = CUBOID_CORNERS + CUBOID_FACES
TRIANGLE_CORNERS = 3
TRIANGLE_SPAN = TRIANGLE_CORNERS + 1


def validate_config(file_path: Union[str, PathLike]) -> List[str]:
    """The lines of the object file; raises ConfigError if it cannot be read."""
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> List[str]:
    """Drop empty lines and section headers."""
    return filter_desired_lines(lines, SECTION_START)


def _colour(colours: Mapping[str, BasicColour], name: str) -> BasicColour:
    if name not in colours:
        raise ConfigError(f"unknown colour {name!r}")
    return colours[name]


def _vector(line: str) -> Vector:
    words = line.split()
    if len(words) != 3:
        raise ConfigError(f"expected three coordinates, got {line!r}")
    values = [generalised_cast(word, float) for word in words]
    if any(value is None for value in values):
        raise ConfigError(f"coordinates are not numbers: {line!r}")
    return tuple(values)


def _colour_pair(colours: Mapping[str, BasicColour], line: str) -> Tuple[BasicColour, BasicColour]:
    words = line.split()
    if len(words) != 2:
        raise ConfigError(f"expected two colour names, got {line!r}")
    return _colour(colours, words[0]), _colour(colours, words[1])


def _following(lines: Sequence[str], index: int, span: int, kind: str) -> Sequence[str]:
    if index + span >= len(lines):
        raise ConfigError(f"{kind} on line {index + 1} needs {span} following lines")
    return lines[index + 1:index + span + 1]


def _sphere(line: str, colours: Mapping[str, BasicColour]) -> Sphere:
    words = line.split()
    if len(words) != SPHERE_WORDS:
        raise ConfigError(f"a sphere needs {SPHERE_WORDS} values: {line!r}")
    # The tag and the colour name are expected to be the words that are not numbers.
    numbers = [value for value in (generalised_cast(word, float) for word in words)
               if value is not None]
    if len(numbers) != SPHERE_NUMBERS:
        raise ConfigError(f"a sphere needs a centre and a radius: {line!r}")
    colour = _colour(colours, words[5])
    return Sphere(tuple(numbers[:3]), numbers[3], colour)


def interpret_lines(scene_config: SceneConfig, lines: Sequence[str],
                    colours: Mapping[str, BasicColour]) -> None:
    """Add the spheres, cuboids and triangles described by ``lines`` to the scene.

    A sphere sits on one line: ``sphere x y z radius colour``. A cuboid line
    is followed by eight corner lines and six lines of two colour names; a
    triangle line by three corner lines and a colour name. Raises ConfigError
    on the first malformed shape, leaving the shapes before it in place.
    """
    lines = list(lines)
    scene = scene_config.scene_setup
    for index, line in enumerate(lines):
        if "sphere" in line:
            scene.add_sphere(_sphere(line, colours))

        if "cuboid" in line:
            block = _following(lines, index, CUBOID_SPAN, "cuboid")
            corners = [_vector(corner) for corner in block[:CUBOID_CORNERS]]
            faces = [_colour_pair(colours, face) for face in block[CUBOID_CORNERS:]]
            face_colours = [colour for pair in faces for colour in pair]
            scene.add_cuboid(*corners, *face_colours)

        if "triangle" in line:
            block = _following(lines, index, TRIANGLE_SPAN, "triangle")
            corners = [_vector(corner) for corner in block[:TRIANGLE_CORNERS]]
            names = block[TRIANGLE_CORNERS].split()
            if len(names) != 1:
                raise ConfigError(f"a triangle needs one colour name: {block[-1]!r}")
            scene.add_triangle(Triangle(*corners, _colour(colours, names[0])))