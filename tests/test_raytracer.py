import re

import pytest

from pinhole_tracer.geometry import Sphere
from pinhole_tracer.raytracer import Raytracer
from pinhole_tracer.scene_config import SceneConfig

HEADER = 54
WIDTH = 8
ASPECT = 2.0
GLOWING = (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.0)


def make_config(**changes):
    config = SceneConfig(
        num_threads=2,
        num_rays=1,
        num_bounces=1,
        contribution_per_bounce=1.0,
        width=WIDTH,
        field_of_view=90,
        aspect_ratio=ASPECT,
        camera_position=(0.0, 0.0, 0.0),
        scene_seed=7,
        print_percent_status_every=50,
        store_result_to_file=True,
        file_name="scene",
    )
    config.scene_setup.add_sphere(Sphere((0.0, 0.0, 5.0), 1.0, GLOWING))
    for key, value in changes.items():
        setattr(config, key, value)
    return config


def test_run_writes_bmp_of_expected_size(tmp_path):
    tracer = Raytracer(make_config(), tmp_path)
    path = tracer.run()
    assert path == tmp_path / "scene.bmp"
    data = path.read_bytes()
    assert data[:2] == b"BM"
    height = tracer.scene_config.height
    assert height == int(WIDTH / ASPECT)
    assert len(data) == HEADER + WIDTH * height * 4


def test_centre_pixel_lit_and_corner_dark(tmp_path):
    tracer = Raytracer(make_config(), tmp_path)
    data = tracer.run().read_bytes()
    height = tracer.scene_config.height
    centre = HEADER + ((height // 2) * WIDTH + WIDTH // 2) * 4
    corner = HEADER
    assert data[centre] > 0
    assert data[centre + 3] == 255
    assert data[corner:corner + 3] == b"\x00\x00\x00"
    assert data[corner + 3] == 255


def test_original_config_is_not_modified(tmp_path):
    config = make_config()
    Raytracer(config, tmp_path).run()
    assert config.height == 0


def test_not_storing_returns_none_and_writes_nothing(tmp_path):
    result = Raytracer(make_config(store_result_to_file=False), tmp_path).run()
    assert result is None
    assert list(tmp_path.iterdir()) == []


def test_default_name_is_randomised_and_seeded(tmp_path):
    from pinhole_tracer.scene_config import FILE_NAME_DEFAULT

    first = Raytracer(make_config(file_name=FILE_NAME_DEFAULT), tmp_path / "a")
    second = Raytracer(make_config(file_name=FILE_NAME_DEFAULT), tmp_path / "b")
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    name_one = first.run().name
    name_two = second.run().name
    assert re.fullmatch(r"OutputScene_\d+\.bmp", name_one)
    assert name_one == name_two


def test_unwritable_output_raises(tmp_path):
    tracer = Raytracer(make_config(), tmp_path / "does_not_exist")
    with pytest.raises(OSError):
        tracer.run()


def test_timings_are_logged(tmp_path, capsys):
    Raytracer(make_config(), tmp_path).run()
    out = capsys.readouterr().out
    assert "System - Ray Simulations - duration:" in out
    assert "System - Writing BMP File - duration:" in out
    assert "System - Program Duration - duration:" in out
    assert "File saved successfully to" in out