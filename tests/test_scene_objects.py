import pytest

from pinhole_tracer.geometry import Sphere, Triangle
from pinhole_tracer.scene_objects import SceneObjects
from pinhole_tracer.vectors import Line


def _colour(tag):
    return (tag, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


CUBE_CORNERS = (
    (-1.0, -1.0, -1.0),  # ldb
    (1.0, -1.0, -1.0),   # rdb
    (1.0, -1.0, 1.0),    # rdf
    (-1.0, -1.0, 1.0),   # ldf
    (-1.0, 1.0, -1.0),   # lub
    (1.0, 1.0, -1.0),    # rub
    (1.0, 1.0, 1.0),     # ruf
    (-1.0, 1.0, 1.0),    # luf
)


@pytest.fixture
def cube_scene():
    scene = SceneObjects()
    colours = [_colour(float(i)) for i in range(12)]
    scene.add_cuboid(*CUBE_CORNERS, *colours)
    return scene, colours


def test_new_scene_is_empty():
    scene = SceneObjects()
    assert scene.shapes == ()
    assert len(scene) == 0


def test_add_sphere_and_triangle_keep_order():
    scene = SceneObjects()
    sphere = Sphere((0.0, 0.0, 5.0), 1.0, _colour(1.0))
    triangle = Triangle((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), _colour(2.0))
    scene.add_sphere(sphere)
    scene.add_triangle(triangle)
    assert scene.shapes == (sphere, triangle)
    assert list(scene) == [sphere, triangle]


def test_cuboid_adds_twelve_triangles(cube_scene):
    scene, _ = cube_scene
    assert len(scene.shapes) == 12
    assert all(isinstance(shape, Triangle) for shape in scene.shapes)


def test_cuboid_face_colours_follow_source_order(cube_scene):
    scene, colours = cube_scene
    d1, d2, l1, l2, r1, r2, b1, b2, f1, f2, u1, u2 = colours
    expected = [b1, b2, u1, u2, l1, l2, r1, r2, b1, b2, f1, f2]
    assert [shape.colour for shape in scene.shapes] == expected


def test_cuboid_first_triangle_corners(cube_scene):
    scene, _ = cube_scene
    ldb, rdb, rdf = CUBE_CORNERS[0], CUBE_CORNERS[1], CUBE_CORNERS[2]
    assert scene.shapes[0].corners == (ldb, rdb, rdf)


def test_ray_through_cube_hits_some_face(cube_scene):
    scene, _ = cube_scene
    ray = Line((0.1, 0.2, -10.0), (0.0, 0.0, 1.0))
    hits = [shape.check_intersection(ray) for shape in scene.shapes]
    assert any(hit.intersects for hit in hits)


def test_ray_beside_cube_misses_every_face(cube_scene):
    scene, _ = cube_scene
    ray = Line((5.0, 5.0, -10.0), (0.0, 0.0, 1.0))
    assert not any(shape.check_intersection(ray).intersects for shape in scene.shapes)


def test_shapes_view_is_a_snapshot():
    scene = SceneObjects()
    before = scene.shapes
    scene.add_sphere(Sphere((0.0, 0.0, 0.0), 1.0, _colour(0.0)))
    assert len(before) == 0
    assert len(scene.shapes) == 1