import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vftext.polygon import (
    determinant,
    intersect,
    is_edge_on_edge,
    is_on_left_side,
    is_point_on_edge,
    resolve_self_intersections,
)

EPS = 1e-4
finite = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)


@given(finite, finite, finite, finite)
def test_determinant_swapping_rows_negates(a, b, c, d):
    assert determinant(a, b, c, d) == pytest.approx(-determinant(c, d, a, b))


@given(finite, finite)
def test_determinant_of_equal_rows_is_zero(a, b):
    assert determinant(a, b, a, b) == pytest.approx(0.0)


def test_is_on_left_side_point_above_rightward_line():
    assert is_on_left_side((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)) is True
    assert is_on_left_side((0.0, 0.0), (1.0, 0.0), (0.0, -1.0)) is False


def test_is_on_left_side_flips_with_direction():
    start, end, point = (0.0, 0.0), (3.0, 1.0), (1.0, 2.0)
    assert is_on_left_side(start, end, point) != is_on_left_side(end, start, point)


def test_intersect_crossing_diagonals():
    vertices = [(0.0, 0.0), (2.0, 2.0), (2.0, 0.0), (0.0, 2.0)]
    point = intersect(vertices, (0, 1), (2, 3), EPS)
    assert point == pytest.approx((1.0, 1.0))


def test_intersection_lies_on_both_edges():
    vertices = [(0.0, 0.0), (5.0, 3.0), (1.0, 4.0), (4.0, -1.0)]
    point = intersect(vertices, (0, 1), (2, 3), EPS)
    assert point is not None
    assert is_point_on_edge(vertices, point, (0, 1), 1e-3)
    assert is_point_on_edge(vertices, point, (2, 3), 1e-3)


def test_intersect_parallel_edges():
    vertices = [(0.0, 0.0), (2.0, 0.0), (0.0, 1.0), (2.0, 1.0)]
    assert intersect(vertices, (0, 1), (2, 3), EPS) is None


def test_intersect_lines_cross_outside_segments():
    vertices = [(0.0, 0.0), (1.0, 1.0), (3.0, 0.0), (4.0, -1.0)]
    assert intersect(vertices, (0, 1), (2, 3), EPS) is None


def test_point_on_edge():
    vertices = [(0.0, 0.0), (4.0, 4.0)]
    assert is_point_on_edge(vertices, (2.0, 2.0), (0, 1), EPS) is True
    assert is_point_on_edge(vertices, (2.0, 3.0), (0, 1), EPS) is False


def test_point_on_line_but_outside_edge():
    vertices = [(0.0, 0.0), (4.0, 4.0)]
    assert is_point_on_edge(vertices, (5.0, 5.0), (0, 1), EPS) is False


def test_edge_on_edge_is_directional():
    vertices = [(0.0, 0.0), (4.0, 0.0), (1.0, 0.0), (3.0, 0.0)]
    assert is_edge_on_edge(vertices, (2, 3), (0, 1), EPS) is True
    assert is_edge_on_edge(vertices, (0, 1), (2, 3), EPS) is False


def test_square_is_left_alone():
    vertices = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
    contour = [(0, 1), (1, 2), (2, 3), (3, 0)]
    points, contours = resolve_self_intersections(vertices, contour, EPS)
    assert points == vertices
    assert contours == [contour]


@given(st.integers(min_value=3, max_value=12))
def test_convex_polygons_are_unchanged(n):
    vertices = [
        (100.0 * math.cos(2 * math.pi * k / n), 100.0 * math.sin(2 * math.pi * k / n))
        for k in range(n)
    ]
    contour = [(k, (k + 1) % n) for k in range(n)]
    points, contours = resolve_self_intersections(vertices, contour, EPS)
    assert points == vertices
    assert contours == [contour]


def test_bowtie_is_split_at_crossing():
    vertices = [(0.0, 0.0), (2.0, 2.0), (2.0, 0.0), (0.0, 2.0)]
    contour = [(0, 1), (1, 2), (2, 3), (3, 0)]
    points, contours = resolve_self_intersections(vertices, contour, EPS)
    crossing = len(vertices)
    assert len(points) == len(vertices) + 1
    assert points[crossing] == pytest.approx((1.0, 1.0))
    assert contours == [[(crossing, 3), (3, 0), (0, crossing)]]


def test_bowtie_output_contours_are_closed_and_inputs_kept():
    vertices = [(0.0, 0.0), (2.0, 2.0), (2.0, 0.0), (0.0, 2.0)]
    contour = [(0, 1), (1, 2), (2, 3), (3, 0)]
    _, contours = resolve_self_intersections(vertices, contour, EPS)
    for result in contours:
        for edge, following in zip(result, result[1:] + result[:1]):
            assert edge[1] == following[0]
    assert contour == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert len(vertices) == 4


def test_inverse_edges_cancel_out():
    vertices = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0)]
    contour = [(0, 1), (1, 2), (2, 1), (1, 0)]
    points, contours = resolve_self_intersections(vertices, contour, EPS)
    assert points == vertices
    assert contours == [[(1, 2), (2, 1)]]