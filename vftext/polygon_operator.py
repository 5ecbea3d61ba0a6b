"""Union of two polygons made of indexed edges.

Vertices are ``(x, y)`` tuples, an edge is a pair of vertex indices and a
polygon is a list of closed contours, each an ordered list of edges.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from vftext.polygon import (
    Edge,
    Vertex,
    intersect,
    is_edge_on_edge,
    is_on_left_side,
    resolve_self_intersections,
)

DEFAULT_EPSILON = 1e-4


@dataclass
class _Contour:
    edges: list[Edge] = field(default_factory=list)
    visited: bool = False


class PolygonOperator:
    """Performs the union of two polygons sharing one vertex buffer."""

    def __init__(self, epsilon: float = DEFAULT_EPSILON) -> None:
        self.epsilon = epsilon
        self._vertices: list[Vertex] = []
        self._first: list[_Contour] = []
        self._second: list[_Contour] = []
        self._intersections: list[int] = []
        self._output: list[list[Edge]] = []

    @property
    def epsilon(self) -> float:
        """Largest distance at which two points count as the same."""
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        if value < 0:
            raise ValueError("epsilon must be positive")
        self._epsilon = value

    @property
    def vertices(self) -> list[Vertex]:
        """Vertices of the last result: the input ones followed by new intersections."""
        return list(self._vertices)

    @property
    def polygon(self) -> list[list[Edge]]:
        """Contours of the last result."""
        return [list(contour) for contour in self._output]

    def join(
        self,
        vertices: Iterable[Vertex],
        first: Iterable[Iterable[Edge]],
        second: Iterable[Iterable[Edge]],
    ) -> tuple[list[Vertex], list[list[Edge]]]:
        """Unite two polygons and return the resulting vertices and contours."""
        self._initialize(vertices, first, second)
        self._resolve_overlapping_edges()
        self._resolve_intersecting_edges()

        used = {
            index
            for contour in (*self._first, *self._second)
            for edge in contour.edges
            for index in edge
        }
        self._intersections = [v for v in self._intersections if v in used]

        self._walk_contours()
        return self.vertices, self.polygon

    def _initialize(
        self,
        vertices: Iterable[Vertex],
        first: Iterable[Iterable[Edge]],
        second: Iterable[Iterable[Edge]],
    ) -> None:
        self._vertices = list(vertices)
        self._intersections = []
        self._output = []
        self._first = self._split_polygon(first)
        self._second = self._split_polygon(second)

    def _split_polygon(self, polygon: Iterable[Iterable[Edge]]) -> list[_Contour]:
        contours: list[_Contour] = []
        for contour in polygon:
            points, parts = resolve_self_intersections(self._vertices, contour, self._epsilon)
            self._vertices = points
            contours.extend(_Contour(list(part)) for part in parts)
        return contours

    def _close(self, a: int, b: int) -> bool:
        return math.dist(self._vertices[a], self._vertices[b]) <= self._epsilon

    def _add_intersection(self, vertex: int) -> None:
        if vertex not in self._intersections:
            self._intersections.append(vertex)

    def _resolve_overlapping_edges(self) -> None:
        points = self._vertices
        for first_contour in self._first:
            first_edges = first_contour.edges
            i = 0
            while i < len(first_edges):
                f = first_edges[i]
                changed = False
                for second_contour in self._second:
                    second_edges = second_contour.edges
                    for j, s in enumerate(second_edges):
                        if self._close(f[0], s[1]) and self._close(f[1], s[0]):
                            # Inverse edges A -> B and B -> A cancel out.
                            del first_edges[i]
                            del second_edges[j]
                            self._add_intersection(f[0])
                            self._add_intersection(f[1])
                            i -= 1
                            changed = True
                            break
                        if is_edge_on_edge(points, s, f, self._epsilon):
                            first_edges.insert(i + 1, (s[0], f[1]))
                            first_edges[i] = (f[0], s[1])
                            del second_edges[j]
                            self._add_intersection(s[1])
                            self._add_intersection(s[0])
                            changed = True
                            break
                        if is_edge_on_edge(points, f, s, self._epsilon):
                            second_edges.insert(j + 1, (f[0], s[1]))
                            second_edges[j] = (s[0], f[1])
                            del first_edges[i]
                            self._add_intersection(f[1])
                            self._add_intersection(f[0])
                            i -= 1
                            changed = True
                            break
                    if changed:
                        break
                i += 1

    def _resolve_intersecting_edges(self) -> None:
        for first_contour in self._first:
            first_edges = first_contour.edges
            i = 0
            while i < len(first_edges):
                f = first_edges[i]
                changed = False
                for second_contour in self._second:
                    second_edges = second_contour.edges
                    for j, s in enumerate(second_edges):
                        crossing = intersect(self._vertices, f, s, self._epsilon)
                        if crossing is None:
                            continue
                        if self._close(f[1], s[1]):
                            # Both polygons share this vertex position.
                            self._add_intersection(f[1])
                        elif (
                            not self._close(f[0], s[0])
                            and not self._close(f[0], s[1])
                            and not self._close(f[1], s[0])
                        ):
                            vertex = len(self._vertices)
                            self._vertices.append(crossing)

                            first_edges[i] = (f[0], vertex)
                            first_edges.insert(i + 1, (vertex, f[1]))
                            second_edges[j] = (s[0], vertex)
                            second_edges.insert(j + 1, (vertex, s[1]))

                            self._add_intersection(vertex)
                            changed = True
                            break
                    if changed:
                        # Re-examine the first part of the split edge.
                        i -= 1
                        break
                i += 1

    def _edges_starting_at(self, vertex: int) -> list[tuple[_Contour, int]]:
        return [
            (contour, position)
            for contour in (*self._first, *self._second)
            for position, edge in enumerate(contour.edges)
            if edge[0] == vertex
        ]

    def _leftmost(self, candidates: Sequence[tuple[_Contour, int]]) -> tuple[_Contour, int]:
        points = self._vertices
        selected = candidates[0]
        for candidate in candidates[1:]:
            best = selected[0].edges[selected[1]]
            edge = candidate[0].edges[candidate[1]]
            if is_on_left_side(points[best[0]], points[best[1]], points[edge[1]]):
                selected = candidate
        return selected

    def _walk_until_intersection_or_start(
        self, contour: _Contour, position: int, current: list[Edge]
    ) -> int:
        edges = contour.edges
        steps = 0
        while edges[position][1] not in self._intersections and (
            not current or edges[position][1] != current[0][0]
        ):
            current.append(edges[position])
            position = (position + 1) % len(edges)
            steps += 1
            if steps > len(edges):
                raise RuntimeError("contour does not reach an intersection or its start")
        current.append(edges[position])
        return edges[position][1]

    def _walk_contours(self) -> None:
        start_vertex = end_vertex = 0
        current: list[Edge] = []

        while self._intersections:
            if start_vertex == end_vertex:
                vertex = self._intersections.pop(0)
                start_vertex = vertex
                current = []
                self._output.append(current)
            else:
                vertex = end_vertex
                self._intersections = [v for v in self._intersections if v != vertex]

            candidates = self._edges_starting_at(vertex)
            if not candidates:
                raise RuntimeError("no edges start at intersection")

            contour, position = self._leftmost(candidates)
            contour.visited = True
            end_vertex = self._walk_until_intersection_or_start(contour, position, current)

        for contour in (*self._first, *self._second):
            if not contour.visited and contour.edges:
                self._output.append(list(contour.edges))