"""Reading the scene settings from a scene configuration file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Dict, List, Union

from .file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
    split_lines_across_equals,
)
from .scene_config import SceneConfig

SECTION_START = "["

# Config key, SceneConfig attribute and value type of every required setting.
REQUIRED_SETTINGS = (
    ("Width", "width", int),
    ("AspectRatio", "aspect_ratio", float),
    ("NumRays", "num_rays", int),
    ("NumBounces", "num_bounces", int),
    ("ContributionPerBounce", "contribution_per_bounce", float),
    ("FieldOfView", "field_of_view", int),
    ("HorizontalRotation", "horizontal_rotation", float),
    ("VerticalRotation", "vertical_rotation", float),
    ("CameraRotation", "camera_rotation", float),
    ("PrintPercentStatusEvery", "print_percent_status_every", int),
    ("StoreResultToFile", "store_result_to_file", bool),
    ("PreviewEnabled", "preview_enabled", bool),
)
CAMERA_OFFSET_KEYS = ("CameraOffset_X", "CameraOffset_Y", "CameraOffset_Z")

_SEED_MASK = 0xFFFFFFFF


def validate_config(file_path: Union[str, PathLike]) -> List[str]:
    """The lines of the scene file; raises ConfigError if it cannot be read."""
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Drop section headers and map each key to its value text."""
    return split_lines_across_equals(filter_desired_lines(lines, SECTION_START))


def interpret_lines(scene_config: SceneConfig, lines: Mapping[str, str]) -> None:
    """Set the scene settings from key-value pairs.

    Raises ConfigError, changing nothing, when a required setting is missing
    or cannot be converted. Optional settings that cannot be converted are
    ignored.
    """
    required_keys = [key for key, _, _ in REQUIRED_SETTINGS] + list(CAMERA_OFFSET_KEYS)
    missing = [key for key in required_keys if key not in lines]
    if missing:
        raise ConfigError(f"missing settings: {', '.join(missing)}")

    values = {}
    invalid = []
    for key, attribute, kind in REQUIRED_SETTINGS:
        value = generalised_cast(lines[key], kind)
        if value is None:
            invalid.append(key)
        else:
            values[attribute] = value

    position = []
    for key in CAMERA_OFFSET_KEYS:
        value = generalised_cast(lines[key], float)
        if value is None:
            invalid.append(key)
        else:
            position.append(value)

    if invalid:
        raise ConfigError(f"invalid settings: {', '.join(invalid)}")

    for attribute, value in values.items():
        setattr(scene_config, attribute, value)
    scene_config.camera_position = tuple(position)

    if "RandomSeed" in lines:
        seed = generalised_cast(lines["RandomSeed"], int)
        if seed is not None:
            scene_config.scene_seed = seed & _SEED_MASK
    if "NumThreads" in lines:
        threads = generalised_cast(lines["NumThreads"], int)
        if threads is not None:
            scene_config.num_threads = threads
    if "FileName" in lines:
        scene_config.file_name = lines["FileName"]
    if "ColourGamma" in lines:
        gamma = generalised_cast(lines["ColourGamma"], float)
        if gamma is not None:
            scene_config.colour_gamma = gamma