"""Settings for one rendering session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .scene_objects import SceneObjects
from .vectors import Vector

FILE_NAME_DEFAULT = "SCENECONFIG_INDICATES_FILENAME_RANDOMISED"


def _num(value: object) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


@dataclass
class SceneConfig:
    """Everything the renderer needs: rays, camera, objects and output."""

    # Rays
    num_threads: int = 0
    num_rays: int = 0
    num_bounces: int = 0
    contribution_per_bounce: float = 0.0

    # Camera
    width: int = 0
    height: int = 0
    field_of_view: int = 0
    colour_gamma: float = 0.4545
    aspect_ratio: float = 0.0
    horizontal_rotation: float = 0.0
    vertical_rotation: float = 0.0
    camera_rotation: float = 0.0
    camera_position: Vector = (0.0, 0.0, 0.0)

    # Objects
    scene_setup: SceneObjects = field(default_factory=SceneObjects)
    scene_seed: Optional[int] = None

    # Output
    print_percent_status_every: int = 0
    store_result_to_file: bool = False
    file_name: str = FILE_NAME_DEFAULT
    preview_enabled: bool = False

    def display_scene_setup(self) -> None:
        """Print a summary of the configuration."""
        x, y, z = self.camera_position
        lines = [
            "//====| Scene Setup |=====//",
            "",
            "<======> Screen Config <======>",
            f"<-=| Screen Width  => {_num(self.width)}",
            f"<-=| Aspect Ratio  => {_num(self.aspect_ratio)}",
            "",
            "<======> Simulation Config <======>",
            f"<-=| Number of Threads         => {_num(self.num_threads)}",
            f"<-=| Number of Rays Per Pixel  => {_num(self.num_rays)}",
            f"<-=| Number of Bounces Per Ray => {_num(self.num_bounces)}",
        ]
        if self.scene_seed is not None:
            lines.append(f"<-=| Random Seed => {self.scene_seed}")
        lines += [
            "",
            "<======> Camera Config <======>",
            f"<-=| Field Of View => {_num(self.field_of_view)}",
            f"<-=| Horizontal Rotation (rad) => {_num(self.horizontal_rotation)}",
            f"<-=| Vertical Rotation   (rad) => {_num(self.vertical_rotation)}",
            f"<-=| Camera Rotation     (rad) => {_num(self.camera_rotation)}",
            f"<-=| Camera Position => [{_num(x)}, {_num(y)}, {_num(z)}]",
            "",
            "<======> Objects Config <======>",
            f"<-=| Number of shapes   => {len(self.scene_setup)}",
            "",
            "<======> Misc Config <======>",
            "<-=| Print Percentage Progress Every => "
            f"{_num(self.print_percent_status_every)}%",
        ]
        if self.store_result_to_file:
            lines.append("<-=| Store Scene to PNG File => True")
            lines.append(f"<-=| File Name => {self.file_name}.bmp")
        else:
            lines.append("<-=| Store Scene to PNG File => False")
        lines.append("")
        print("\n".join(lines))