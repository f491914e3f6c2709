"""Loading a whole scene from its three configuration files."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path
from typing import Dict, List, Union

from . import colour_reader, config_reader, object_config
from .colour import BasicColour
from .file_reader import ConfigError
from .scene_config import SceneConfig

SCENE_FILE = "scene_config.ini"
COLOUR_FILE = "colour_data.ini"
OBJECT_FILE = "object_config.ini"


def load_scene_config(directory: Union[str, PathLike] = ".") -> SceneConfig:
    """Read the scene settings, colours and objects from ``directory``.

    Every file is checked before giving up, and ConfigError lists all the
    problems found. With no thread count given, one thread per CPU is used.
    """
    base = Path(directory)
    readers = (
        (SCENE_FILE, config_reader.validate_config),
        (COLOUR_FILE, colour_reader.validate_config),
        (OBJECT_FILE, object_config.validate_config),
    )

    problems: List[str] = []
    contents: Dict[str, List[str]] = {}
    for name, read in readers:
        try:
            contents[name] = read(base / name)
        except ConfigError:
            problems.append(f"Could not find {name}")
    if problems:
        raise ConfigError("; ".join(problems))

    config = SceneConfig()
    colours: Dict[str, BasicColour] = {}

    try:
        config_reader.interpret_lines(config, config_reader.clean_up_lines(contents[SCENE_FILE]))
    except ConfigError as exc:
        problems.append(f"Some values were invalid or missing in {SCENE_FILE}: {exc}")
    try:
        colours = colour_reader.interpret_lines(
            colour_reader.clean_up_lines(contents[COLOUR_FILE]))
    except ConfigError as exc:
        problems.append(f"Some values were invalid in {COLOUR_FILE}: {exc}")
    try:
        object_config.interpret_lines(
            config, object_config.clean_up_lines(contents[OBJECT_FILE]), colours)
    except ConfigError as exc:
        problems.append(f"Something went wrong interpreting {OBJECT_FILE}: {exc}")

    if problems:
        raise ConfigError("; ".join(problems))

    if config.num_threads == 0:
        config.num_threads = os.cpu_count() or 1
    return config