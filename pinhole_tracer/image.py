"""Rendering a scene into an RGBA pixel buffer and saving it to disk."""

from __future__ import annotations

import math
import random
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from typing import List, Sequence, Tuple, Union

from .bmp import write_bmp
from .camera import Camera
from .colour import BasicColour, ColourData, get_average_of_colours
from .geometry import IntersectionData
from .raylogic import calculate_new_ray_direction
from .scene_objects import SceneObjects
from .vectors import Line, normalise

BYTES_PER_PIXEL = 4

IndexRange = Tuple[int, int]


def populate_index_arrays(num_threads: int, row_width: int,
                          num_rows: int) -> Tuple[List[IndexRange], List[IndexRange]]:
    """Share the rows out between threads.

    Returns two lists with one inclusive ``(start, end)`` range per thread:
    the camera rows each thread renders, and the matching byte range in
    the pixel buffer. Leftover rows go one each to the first threads.
    """
    if num_threads < 1:
        raise ValueError("at least one thread is needed")

    extra_rows = num_rows % num_threads
    base_rows = (num_rows - extra_rows) // num_threads
    row_bytes = row_width * BYTES_PER_PIXEL

    row_ranges: List[IndexRange] = []
    accounted = 0
    for thread_id in range(num_threads):
        start = thread_id * base_rows + accounted
        if accounted != extra_rows:
            accounted += 1
        end = (thread_id + 1) * base_rows - 1 + accounted
        row_ranges.append((start, end))

    buffer_ranges = [(start * row_bytes, (end + 1) * row_bytes - 1)
                     for start, end in row_ranges]
    return row_ranges, buffer_ranges


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(255, int(255.0 * value)))


def _closest_hit(shapes: Sequence, ray: Line) -> IntersectionData:
    closest = IntersectionData()
    for shape in shapes:
        hit = shape.check_intersection(ray)
        if hit.intersects and (hit.lam < closest.lam or closest.lam < 0):
            closest = hit
    return closest


def render(width: int, height: int, objects: SceneObjects, num_threads: int,
           camera: Camera, num_rays: int, num_bounces: int, rand_gen: random.Random,
           stat_log_every: int, contribution: float, colour_gamma: float,
           rasterised_mode_on: bool) -> bytes:
    """Trace every pixel of the camera and return the RGBA bytes, rows top to bottom.

    In rasterised mode the surface colours are shown; otherwise the light
    gathered along each ray is, and progress is printed as the work goes on.
    """
    pixel_buffer = bytearray(width * height * BYTES_PER_PIXEL)
    if height == 0 or width == 0:
        return bytes(pixel_buffer)
    if num_threads < 1:
        raise ValueError("at least one thread is needed")
    if num_rays < 1:
        raise ValueError("at least one ray per pixel is needed")

    threads_needed = min(num_threads, height)
    row_ranges, buffer_ranges = populate_index_arrays(threads_needed, width, height)

    camera_origin = camera.pinhole_pos
    shapes = objects.shapes
    channels = (0, 1, 2) if rasterised_mode_on else (3, 4, 5)

    def trace_pixel(direction: Sequence[float]) -> BasicColour:
        colours = []
        for _ in range(num_rays):
            ray = Line(camera_origin, normalise(direction))
            ray_colour = ColourData()
            hits_nothing = False
            for bounce in range(num_bounces):
                closest = _closest_hit(shapes, ray)
                if not closest.intersects:
                    hits_nothing = bounce == 0
                    break
                ray = calculate_new_ray_direction(
                    ray, closest.point_of_intersection, closest.normal,
                    closest.colour, rand_gen)
                ray_colour.combine_colour_as_average(closest.colour, bounce, contribution)
            colours.append(ray_colour.total_colour)
            # A primary ray that misses means every other ray misses too.
            if hits_nothing:
                break
        return get_average_of_colours(colours, colour_gamma)

    def render_rows(thread_id: int) -> None:
        first_row, last_row = row_ranges[thread_id]
        position = buffer_ranges[thread_id][0]
        lowest_passed = 0
        for row in range(first_row, last_row + 1):
            if not rasterised_mode_on and thread_id == 0:
                percent = 100.0 * row / last_row if last_row else 100.0
                if int(percent) > lowest_passed:
                    lowest_passed += stat_log_every
                    print(f">>> Approximate Completion: {percent:g}%")

            directions = camera.get_row(row)
            if directions is None:
                return
            for direction in directions:
                colour = trace_pixel(direction)
                pixel_buffer[position:position + BYTES_PER_PIXEL] = bytes(
                    (*(_to_byte(colour[channel]) for channel in channels), 255))
                position += BYTES_PER_PIXEL

    if not rasterised_mode_on:
        print(">>> Beginning Computation")

    with ThreadPoolExecutor(max_workers=threads_needed) as pool:
        futures = [pool.submit(render_rows, thread_id) for thread_id in range(threads_needed)]
        for future in futures:
            future.result()

    if not rasterised_mode_on:
        print(">>> Computation Finished")

    return bytes(pixel_buffer)


def save_image(file_name: Union[str, PathLike], width: int, height: int,
               pixel_buffer: Sequence[int]) -> None:
    """Save the pixel buffer as a BMP file and report the outcome.

    Raises OSError or ValueError when the file cannot be written.
    """
    try:
        write_bmp(file_name, pixel_buffer, width, height)
    except (OSError, ValueError):
        print("There was an error trying to save the file")
        raise
    print(f"File saved successfully to {file_name}")