import math
import random

import pytest

from pinhole_tracer.vectors import (
    Line,
    Plane,
    add,
    angle_between_line_and_plane,
    angle_between_lines,
    are_vectors_equal,
    as_abs,
    cross,
    divide,
    dot,
    is_point_on_plane,
    line_intersects_plane,
    magnitude,
    magnitude_squared,
    multiply,
    normalise,
    point_to_line_distance,
    reflect_point_across_plane,
    scalar_distance,
    scale,
    subtract,
    vector_distance,
)

TEST_PLANE = Plane((0.0, 0.0, 1.0), 10.0)


def _random_pairs():
    rng = random.Random(0)
    pairs = []
    while len(pairs) < 100:
        num1 = rng.randint(-9999, 9999)
        num2 = rng.randint(-9999, 9999)
        if num2 != 0:
            pairs.append((num1, num2))
    return pairs


@pytest.mark.parametrize("num1,num2", _random_pairs())
def test_overloads_match_primitive_operations(num1, num2):
    assert add((num1,), (num2,)) == (num1 + num2,)
    assert subtract((num1,), (num2,)) == (num1 - num2,)
    assert multiply((num1,), (num2,)) == (num1 * num2,)
    assert divide((num1,), (num2,)) == (math.trunc(num1 / num2),)


@pytest.mark.parametrize(
    "num1,num2,expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (1, 3, 0)]
)
def test_integer_division_truncates_toward_zero(num1, num2, expected):
    assert divide((num1,), (num2,)) == (expected,)


def test_float_division():
    assert divide((1.0,), (4.0,)) == (0.25,)


def test_mixed_size_addition_keeps_tail():
    result = add((1, 2), (-3.0, 12.3, 91.2))
    assert result == pytest.approx((-2.0, 14.3, 91.2))


def test_mixed_size_subtraction_keeps_tail_unchanged():
    assert subtract((10.0, 10.0, 10.0), (1.0, 2.0)) == (9.0, 8.0, 10.0)
    assert subtract((1.0, 2.0), (10.0, 10.0, 10.0)) == (-9.0, -8.0, 10.0)


def test_magnitude_of_two_and_three_vectors():
    assert magnitude((3, 4)) == 5
    assert magnitude((3, 4, 0)) == 5


def test_normalise_gives_unit_length():
    assert abs(magnitude(normalise((3.0, 4.0))) - 1.0) < 1e-09
    assert abs(magnitude(normalise((3.0, 4.0, 0.0))) - 1.0) < 1e-09


def test_normalise_zero_vector_is_nan():
    result = normalise((0.0, 0.0, 0.0))
    assert len(result) == 3
    assert [math.isnan(c) for c in result] == [True, True, True]


def test_scale_multiplies_magnitude():
    assert magnitude(scale((3.0, 4.0), 4)) == 5 * 4
    assert magnitude(scale((3.0, 4.0, 0.0), 4)) == 5 * 4


def test_magnitude_squared():
    assert magnitude_squared((3.0, 4.0, 0.0)) == 25.0


def test_vector_and_scalar_distance():
    assert vector_distance((1.0, 1.0, 1.0), (4.0, 5.0, 1.0)) == (3.0, 4.0, 0.0)
    assert scalar_distance((1.0, 1.0, 1.0), (4.0, 5.0, 1.0)) == 5.0


def test_as_abs():
    assert as_abs((-1.0, 2.0, -3.5)) == (1.0, 2.0, 3.5)


def test_are_vectors_equal():
    assert are_vectors_equal((1.0, 2.0, 3.0), (1.0, 2.0, 3.0 + 1e-12))
    assert not are_vectors_equal((1.0, 2.0, 3.0), (1.0, 2.0, 3.1))
    assert not are_vectors_equal((1.0, 2.0), (1.0, 2.0, 0.0))


def test_dot_products():
    assert abs(dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) - 32.0) < 1e-09
    assert abs(dot((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))) < 1e-09


def test_cross_products():
    non_zero = cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    zero = cross((2.0, 2.0, 2.0), (4.0, 4.0, 4.0))
    assert abs(magnitude(non_zero) - 1) < 1e-09
    assert non_zero == (0.0, 0.0, 1.0)
    assert abs(magnitude(zero)) < 1e-09


def test_cross_is_perpendicular_to_inputs():
    a, b = (1.0, 2.0, 3.0), (-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert abs(dot(c, a)) < 1e-09
    assert abs(dot(c, b)) < 1e-09


def test_line_intersects_plane():
    hit = line_intersects_plane(Line((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), TEST_PLANE)
    assert hit is not None
    lam, point = hit
    assert lam == pytest.approx(10.0)
    assert point == pytest.approx((0.0, 0.0, 10.0))


def test_parallel_line_misses_plane():
    assert line_intersects_plane(Line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)), TEST_PLANE) is None


def test_is_point_on_plane():
    assert is_point_on_plane((0.0, 0.0, 10.0), TEST_PLANE)
    assert not is_point_on_plane((10.0, 0.0, 0.0), TEST_PLANE)


def test_point_to_line_distance():
    line = Line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    lam, offset = point_to_line_distance(line, (5.0, 5.0, 0.0))
    assert abs(magnitude(offset) - 5.0) < 1e-09
    assert lam == pytest.approx(5.0)


def test_point_to_degenerate_line():
    lam, offset = point_to_line_distance(Line((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)), (1.0, 2.0, 3.0))
    assert lam == 0.0
    assert offset == (0.0, 0.0, 0.0)


def test_reflect_point_across_plane():
    reflected = reflect_point_across_plane((0.0, 0.0, 0.0), TEST_PLANE)
    assert abs(abs(reflected[2]) - 20.0) < 1e-09


def test_reflect_with_zero_normal_returns_point():
    assert reflect_point_across_plane((1.0, 2.0, 3.0), Plane((0.0, 0.0, 0.0), 4.0)) == (1.0, 2.0, 3.0)


def test_angle_between_line_and_plane():
    perp = angle_between_line_and_plane(Line((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), TEST_PLANE)
    para = angle_between_line_and_plane(Line((0.0, 0.0, 0.0), (1.0, 2.0, 0.0)), TEST_PLANE)
    assert para is None
    assert abs(perp - math.pi / 2.0) < 1e-09


def test_angle_between_lines_acute_and_obtuse():
    acute = angle_between_lines((1.0, 0.0, 0.0), (1.0, 1.0, 0.0))
    obtuse = angle_between_lines((1.0, 0.0, 0.0), (1.0, 1.0, 0.0), wants_acute=False)
    assert acute == pytest.approx(math.pi / 4)
    assert acute + obtuse == pytest.approx(math.pi)


def test_angle_between_lines_ignores_direction_sign():
    assert angle_between_lines((1.0, 0.0, 0.0), (-1.0, -1.0, 0.0)) == pytest.approx(
        angle_between_lines((1.0, 0.0, 0.0), (1.0, 1.0, 0.0))
    )