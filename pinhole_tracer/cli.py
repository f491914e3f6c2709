"""Command line entry point: load the scene files and render them."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .file_reader import ConfigError
from .loader import load_scene_config
from .raytracer import Raytracer


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pinhole_tracer",
        description="Render the scene described by scene_config.ini, "
                    "colour_data.ini and object_config.ini.")
    parser.add_argument(
        "directory", nargs="?", default=".",
        help="directory holding the configuration files and receiving the image")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Load the configuration, render the scene and return an exit status."""
    args = _parse_args(argv)

    try:
        scene_config = load_scene_config(args.directory)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        print("Session terminated due to config reader errors", file=sys.stderr)
        return 1

    try:
        Raytracer(scene_config, args.directory).run()
    except (OSError, ValueError):
        print("Session terminated due to image saving errors", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())