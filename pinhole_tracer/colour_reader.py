"""Reading named colours from a colour configuration file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Dict, List, Union

from .colour import COLOUR_CHANNELS, BasicColour
from .file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
    split_lines_across_equals,
)

SECTION_START = "["
INVALID_CHANNEL = -1.0


def validate_config(file_path: Union[str, PathLike]) -> List[str]:
    """The lines of the colour file; raises ConfigError if it cannot be read."""
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Drop section headers and map each colour name to its value text."""
    return split_lines_across_equals(filter_desired_lines(lines, SECTION_START))


def _parse_colour(name: str, text: str) -> BasicColour:
    words = text.split()
    if len(words) != COLOUR_CHANNELS:
        raise ConfigError(
            f"colour {name!r} has {len(words)} values, {COLOUR_CHANNELS} expected")
    channels = []
    for word in words:
        value = generalised_cast(word, float)
        channels.append(INVALID_CHANNEL if value is None else value)
    return tuple(channels)


def interpret_lines(lines: Mapping[str, str]) -> Dict[str, BasicColour]:
    """Turn name-to-text pairs into colours.

    A value that is not a number becomes -1; a colour without exactly eight
    values raises ConfigError.
    """
    return {name: _parse_colour(name, text) for name, text in lines.items()}