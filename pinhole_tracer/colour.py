"""Colour accumulation along a ray and per-pixel averaging.

A colour holds eight channels: red, green, blue (0-2), emitted red, green,
blue (3-5), emission strength (6) and gloss (7).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import List, Tuple

COLOUR_CHANNELS = 8

BasicColour = Tuple[float, ...]


def _gamma_correct(average: float, gamma: float) -> float:
    try:
        return math.pow(average / (1.0 + average), gamma)
    except (ValueError, ZeroDivisionError, OverflowError):
        return math.nan


def get_average_of_colours(colours: Iterable[Sequence[float]], gamma: float) -> BasicColour:
    """Average the colours channel by channel, tone-map and gamma-correct them."""
    colours = [tuple(colour) for colour in colours]
    if not colours:
        raise ValueError("cannot average an empty set of colours")
    if any(len(colour) != COLOUR_CHANNELS for colour in colours):
        raise ValueError(f"every colour needs {COLOUR_CHANNELS} channels")
    count = len(colours)
    return tuple(
        _gamma_correct(sum(channel) / count, gamma) for channel in zip(*colours)
    )


@dataclass
class ColourData:
    """The colour gathered by one ray over its bounces."""

    total_colour: BasicColour = (1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    previous_colours: List[BasicColour] = field(default_factory=list)
    num_colours_accumulated: int = 0

    def combine_colour_as_average(self, new_colour: Sequence[float], bounce_info: int,
                                  contribution: float) -> None:
        """Fold the colour of a newly hit surface into the running total."""
        new_colour = tuple(new_colour)
        self.previous_colours.append(new_colour)

        red, green, blue, emit_r, emit_g, emit_b, strength, gloss = self.total_colour
        light = new_colour[6]

        # Emitted light is tinted by the colour gathered before this bounce.
        emit_r += red * (new_colour[3] * light)
        emit_g += green * (new_colour[4] * light)
        emit_b += blue * (new_colour[5] * light)

        red *= new_colour[0] * contribution
        green *= new_colour[1] * contribution
        blue *= new_colour[2] * contribution

        self.total_colour = (red, green, blue, emit_r, emit_g, emit_b, strength, gloss)
        self.num_colours_accumulated += 1