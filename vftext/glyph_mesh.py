"""Vertex and index buffers of a composed glyph."""

from __future__ import annotations

from collections.abc import Iterable

Vertex = tuple[float, float]

DEFAULT_DRAW_COUNT = 10


class GlyphMesh:
    """A glyph's vertices plus one or more index buffers used for drawing."""

    def __init__(
        self,
        vertices: Iterable[Vertex] | None = None,
        indices: Iterable[Iterable[int]] | None = None,
    ) -> None:
        self.vertices: list[Vertex] = list(vertices) if vertices is not None else []
        if indices is None:
            self._indices: list[list[int]] = [[] for _ in range(DEFAULT_DRAW_COUNT)]
        else:
            self._indices = [list(buffer) for buffer in indices]

    def _check_draw_index(self, draw_index: int) -> None:
        if not 0 <= draw_index < len(self._indices):
            raise IndexError(f"index buffer {draw_index} is out of range")

    def add_vertex(self, vertex: Vertex) -> None:
        """Append a vertex to the vertex buffer."""
        self.vertices.append(vertex)

    def set_indices(self, draw_index: int, indices: Iterable[int]) -> None:
        """Replace one index buffer."""
        self._check_draw_index(draw_index)
        self._indices[draw_index] = list(indices)

    def indices(self, draw_index: int) -> list[int]:
        """Return the index buffer at ``draw_index``."""
        self._check_draw_index(draw_index)
        return self._indices[draw_index]

    def index_count(self, draw_index: int) -> int:
        """Return the number of indices in one index buffer."""
        return len(self.indices(draw_index))

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def draw_count(self) -> int:
        return len(self._indices)