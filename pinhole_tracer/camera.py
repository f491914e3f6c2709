"""A pinhole camera that produces a direction for every pixel."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import List, Optional

from .vectors import PI, Vector, add, subtract

PINHOLE: Vector = (0.0, 0.0, -1.0)


class Camera:
    """Pinhole camera one unit behind a projection plane, with roll, pitch and yaw."""

    def __init__(self, width: int, aspect_ratio: float, fov_degrees: float,
                 horiz_rotation: float, vert_rotation: float, camera_rotation: float,
                 offset: Sequence[float]) -> None:
        if aspect_ratio <= 0:
            raise ValueError("aspect ratio must be positive")
        self.width = int(width)
        self.height = int(self.width / aspect_ratio)
        self.aspect_ratio = aspect_ratio
        self.fov_degrees = fov_degrees
        self.yaw = horiz_rotation
        self.pitch = vert_rotation
        self.roll = camera_rotation
        self.offset: Vector = tuple(offset)
        self.pinhole_pos: Vector = PINHOLE
        self.pixel_directions: List[List[Vector]] = [
            [(0.0, 0.0, 0.0)] * self.width for _ in range(self.height)
        ]

    def _rotate(self, vec: Vector) -> Vector:
        """Apply roll, then pitch, then yaw."""
        cr, sr = math.cos(self.roll), math.sin(self.roll)
        cp, sp = math.cos(self.pitch), math.sin(self.pitch)
        cy, sy = math.cos(self.yaw), math.sin(self.yaw)

        x, y, z = vec
        x, y = x * cr - y * sr, x * sr + y * cr
        y, z = y * cp - z * sp, y * sp + z * cp
        x, z = x * cy + z * sy, z * cy - x * sy
        return (x, y, z)

    def populate_pixel_directions(self) -> None:
        """Fill in the rotated direction of every pixel and place the pinhole."""
        fov = self.fov_degrees * PI / 180.0
        plane_width = math.tan(fov / 2) * 2
        plane_height = plane_width / self.aspect_ratio
        x_offset = plane_width / 2.0
        y_offset = plane_height / 2.0
        x_scale = plane_width / self.width if self.width else 0.0
        y_scale = plane_height / self.height if self.height else 0.0

        self.pixel_directions = [
            [
                self._rotate(subtract(
                    (x_scale * x - x_offset, y_scale * y - y_offset, 0.0), PINHOLE))
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]
        self.pinhole_pos = add(PINHOLE, self.offset)

    def get_pixel(self, width: int, height: int) -> Optional[Vector]:
        """Direction of the pixel at column ``width`` and row ``height``, or None."""
        if 0 <= height < len(self.pixel_directions):
            row = self.pixel_directions[height]
            if 0 <= width < len(row):
                return row[width]
        return None

    def get_row(self, height: int) -> Optional[List[Vector]]:
        """A copy of the directions on row ``height``, or None if out of range."""
        if 0 <= height < len(self.pixel_directions):
            return list(self.pixel_directions[height])
        return None