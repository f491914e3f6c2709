"""Running a full render of a configured scene and saving the result."""

from __future__ import annotations

import dataclasses
import random
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .camera import Camera
from .image import render, save_image
from .scene_config import FILE_NAME_DEFAULT, SceneConfig
from .timer import TimeUnit, Timer, log_context

FILE_ID_MIN = 1
FILE_ID_MAX = 999999
# Durations at or above this many seconds are reported in minutes.
SECONDS_TO_MINUTES_CUTOFF = 300.0


class Raytracer:
    """Renders one scene configuration and optionally writes it to a BMP file."""

    def __init__(self, scene_config: SceneConfig,
                 output_dir: Union[str, PathLike] = ".") -> None:
        self.scene_config = dataclasses.replace(scene_config)
        self.output_dir = Path(output_dir)

    def __repr__(self) -> str:
        return f"Raytracer(output_dir={str(self.output_dir)!r})"

    def _random_generator(self) -> random.Random:
        seed = self.scene_config.scene_seed
        return random.Random(seed) if seed is not None else random.Random()

    def _output_path(self, rand_gen: random.Random) -> Path:
        name = self.scene_config.file_name
        if name == FILE_NAME_DEFAULT:
            name = f"OutputScene_{rand_gen.randint(FILE_ID_MIN, FILE_ID_MAX)}"
        return self.output_dir / f"{name}.bmp"

    def run(self) -> Optional[Path]:
        """Render the scene, save it if asked to, and report timings.

        Returns the path of the saved image, or None when the result is not
        stored. Raises OSError or ValueError when the image cannot be saved.
        """
        program_minutes = Timer(TimeUnit.MINUTES)
        program_seconds = Timer(TimeUnit.SECONDS)

        config = self.scene_config
        rand_gen = self._random_generator()

        config.display_scene_setup()

        camera = Camera(
            config.width, config.aspect_ratio, config.field_of_view,
            config.horizontal_rotation, config.vertical_rotation,
            config.camera_rotation, config.camera_position)
        camera.populate_pixel_directions()
        config.height = camera.height

        render_minutes = Timer(TimeUnit.MINUTES)
        render_seconds = Timer(TimeUnit.SECONDS)
        pixel_buffer = render(
            config.width, config.height, config.scene_setup, config.num_threads,
            camera, config.num_rays, config.num_bounces, rand_gen,
            config.print_percent_status_every, config.contribution_per_bounce,
            config.colour_gamma, False)
        render_minutes.stop_clock()
        render_seconds.stop_clock()

        output_path: Optional[Path] = None
        with Timer(TimeUnit.MILLISECONDS) as saver_timer:
            if config.store_result_to_file:
                output_path = self._output_path(rand_gen)
                save_image(output_path, config.width, config.height, pixel_buffer)

        program_minutes.stop_clock()
        program_seconds.stop_clock()

        print()
        if render_seconds.time_difference < SECONDS_TO_MINUTES_CUTOFF:
            log_context("Ray Simulations", "s", render_seconds.time_difference)
        else:
            log_context("Ray Simulations", "min", render_minutes.time_difference)
        log_context("Writing BMP File", "ms", saver_timer.time_difference)
        if program_seconds.time_difference < SECONDS_TO_MINUTES_CUTOFF:
            log_context("Program Duration", "s", program_seconds.time_difference)
        else:
            log_context("Program Duration", "min", program_minutes.time_difference)

        return output_path