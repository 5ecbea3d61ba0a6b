"""Geometric primitives on indexed polygon edges and self-intersection removal.

Vertices are ``(x, y)`` tuples. An edge is a pair of vertex indices
``(start, end)``. A contour is a closed, ordered list of edges.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Vertex = tuple[float, float]
Edge = tuple[int, int]
Contour = list[Edge]


def determinant(a: float, b: float, c: float, d: float) -> float:
    """Return the determinant of the 2x2 matrix ``[[a, b], [c, d]]``."""
    return a * d - b * c


def is_on_left_side(start: Vertex, end: Vertex, point: Vertex) -> bool:
    """Return whether ``point`` lies on the left of the line from ``start`` to ``end``."""
    a = end[1] - start[1]
    b = start[0] - end[0]
    c = end[0] * start[1] - start[0] * end[1]
    return a * point[0] + b * point[1] + c < 0


def intersect(
    vertices: Sequence[Vertex], first: Edge, second: Edge, epsilon: float
) -> Vertex | None:
    """Return the point where two edges cross, or ``None`` if they do not."""
    x1, y1 = vertices[first[0]]
    x2, y2 = vertices[first[1]]
    x3, y3 = vertices[second[0]]
    x4, y4 = vertices[second[1]]

    det1 = determinant(x1 - x2, y1 - y2, x3 - x4, y3 - y4)
    det2 = determinant(x1 - x3, y1 - y3, x3 - x4, y3 - y4)
    if abs(det1) < epsilon or abs(det2) < epsilon:
        return None

    first_det = determinant(x1, y1, x2, y2)
    second_det = determinant(x3, y3, x4, y4)
    x = determinant(first_det, x1 - x2, second_det, x3 - x4) / det1
    y = determinant(first_det, y1 - y2, second_det, y3 - y4) / det1

    within_first = min(x1, x2) <= x <= max(x1, x2) and min(y1, y2) <= y <= max(y1, y2)
    within_second = min(x3, x4) <= x <= max(x3, x4) and min(y3, y4) <= y <= max(y3, y4)
    if within_first and within_second:
        return (x, y)
    return None


def is_point_on_edge(
    vertices: Sequence[Vertex], point: Vertex, edge: Edge, epsilon: float
) -> bool:
    """Return whether ``point`` lies on ``edge``."""
    sx, sy = vertices[edge[0]]
    ex, ey = vertices[edge[1]]
    px, py = point
    if px < min(sx, ex) or px > max(sx, ex) or py < min(sy, ey) or py > max(sy, ey):
        return False

    point_x, point_y = px - ex, py - ey
    line_x, line_y = ex - sx, ey - sy
    return abs(line_x * point_y - line_y * point_x) < epsilon


def is_edge_on_edge(
    vertices: Sequence[Vertex], first: Edge, second: Edge, epsilon: float
) -> bool:
    """Return whether edge ``first`` lies entirely on edge ``second``."""
    return is_point_on_edge(vertices, vertices[first[0]], second, epsilon) and is_point_on_edge(
        vertices, vertices[first[1]], second, epsilon
    )


def _add_intersection(intersections: list[int], vertex: int) -> None:
    if vertex not in intersections:
        intersections.append(vertex)


def _remove_unwanted_intersections(
    intersections: list[int], contours: Iterable[Sequence[Edge]]
) -> list[int]:
    used = {index for contour in contours for edge in contour for index in edge}
    return [vertex for vertex in intersections if vertex in used]


def _leftmost(vertices: Sequence[Vertex], candidates: Sequence[Edge]) -> int:
    selected = 0
    for position, edge in enumerate(candidates[1:], start=1):
        best = candidates[selected]
        if is_on_left_side(vertices[best[0]], vertices[best[1]], vertices[edge[1]]):
            selected = position
    return selected


def _far_apart(points: Sequence[Vertex], a: int, b: int, epsilon: float) -> bool:
    return math.dist(points[a], points[b]) > epsilon


def _close(points: Sequence[Vertex], a: int, b: int, epsilon: float) -> bool:
    return math.dist(points[a], points[b]) <= epsilon


def _resolve_overlaps(
    points: list[Vertex], contour: Contour, intersections: list[int], epsilon: float
) -> None:
    i = 0
    while i < len(contour):
        first = contour[i]
        j = i + 2
        while j < len(contour):
            second = contour[j]
            if _close(points, first[0], second[1], epsilon) and _close(
                points, first[1], second[0], epsilon
            ):
                # Inverse edges A -> B and B -> A cancel out.
                del contour[j]
                del contour[i]
                _add_intersection(intersections, first[0])
                _add_intersection(intersections, first[1])
                j -= 1
                if i >= len(contour):
                    break
                first = contour[i]
            elif is_edge_on_edge(points, second, first, epsilon):
                contour.insert(i + 1, (second[0], first[1]))
                contour[i] = (contour[i][0], second[1])
                j += 1
                del contour[j]
                _add_intersection(intersections, second[1])
                _add_intersection(intersections, second[0])
                j -= 1
                first = contour[i]
            elif is_edge_on_edge(points, first, second, epsilon):
                contour.insert(j + 1, (first[0], second[1]))
                contour[j] = (contour[j][0], first[1])
                del contour[i]
                _add_intersection(intersections, first[1])
                _add_intersection(intersections, first[0])
                i -= 1
                break
            j += 1
        i += 1


def _resolve_crossings(
    points: list[Vertex], contour: Contour, intersections: list[int], epsilon: float
) -> None:
    i = 0
    while i < len(contour):
        first = contour[i]
        j = i + 2
        while j < len(contour):
            second = contour[j]
            crossing = intersect(points, first, second, epsilon)
            if crossing is not None and all(
                _far_apart(points, a, b, epsilon)
                for a, b in (
                    (first[0], second[0]),
                    (first[0], second[1]),
                    (first[1], second[0]),
                    (first[1], second[1]),
                )
            ):
                vertex = len(points)
                points.append(crossing)

                contour.insert(i + 1, (vertex, first[1]))
                contour[i] = (contour[i][0], vertex)
                j += 1
                contour.insert(j + 1, (vertex, second[1]))
                contour[j] = (contour[j][0], vertex)

                _add_intersection(intersections, vertex)
                first = contour[i]
            j += 1
        i += 1


def _walk(points: Sequence[Vertex], contour: Contour, intersections: list[int]) -> list[Contour]:
    start_vertex = end_vertex = 0
    output: list[Contour] = []
    current: Contour = []

    while intersections:
        if start_vertex == end_vertex:
            vertex = intersections.pop(0)
            start_vertex = vertex
            current = []
            output.append(current)
        else:
            vertex = end_vertex
            intersections[:] = [v for v in intersections if v != vertex]

        starting = [position for position, edge in enumerate(contour) if edge[0] == vertex]
        if not starting:
            raise RuntimeError("no edges start at intersection")

        node = starting[_leftmost(points, [contour[p] for p in starting])]
        steps = 0
        while contour[node][1] not in intersections and (
            not current or contour[node][1] != current[0][0]
        ):
            current.append(contour[node])
            node = (node + 1) % len(contour)
            steps += 1
            if steps > len(contour):
                raise RuntimeError("contour does not close")
        current.append(contour[node])
        end_vertex = contour[node][1]

    return output


def resolve_self_intersections(
    vertices: Iterable[Vertex], contour: Iterable[Edge], epsilon: float
) -> tuple[list[Vertex], list[Contour]]:
    """Split a contour into contours without self intersections.

    Returns the vertices, extended by any new crossing points, and the
    resulting contours. The arguments are left unchanged.
    """
    points = list(vertices)
    edges: Contour = list(contour)
    intersections: list[int] = []

    _resolve_overlaps(points, edges, intersections, epsilon)
    _resolve_crossings(points, edges, intersections, epsilon)
    intersections = _remove_unwanted_intersections(intersections, [edges])

    if not intersections:
        return points, [edges]
    return points, _walk(points, edges, intersections)