# vftext

Pure-Python building blocks for turning text into vector geometry. The
package handles encoding conversion, text normalisation, line breaking
and alignment. It also covers adaptive subdivision of quadratic Bezier
curves and the union of polygons built from indexed edges.

It has no runtime dependencies.

## Installation

```
pip install vftext
```

To run the test suite:

```
pip install "vftext[test]"
pytest
```

## Modules

### `vftext.unicode`

This module converts between three encodings. UTF-8 text is `bytes`.
UTF-16 text is a list of 16-bit code units. UTF-32 text is a `str`; when
encoding, any iterable of integer code points is also accepted.

- `utf8_to_utf32`, `utf8_to_utf16`
- `utf16_to_utf32`, `utf16_to_utf8`
- `utf32_to_utf8`, `utf32_to_utf16`
- `utf8_char_size(first_byte)` gives the byte length of a UTF-8 character
  from its first byte.
- `utf16_char_size(code_unit)` returns 4 for a high surrogate and 2
  otherwise.

Invalid input raises `ValueError`. This covers bad lead bytes, truncated
sequences, bad surrogates and code points outside the Unicode range.

### `vftext.shaper`

- `preprocess_text(text)` replaces each tab with four spaces. It also
  turns CR LF pairs and lone CRs into LF.
- `split_lines(text)` normalises the text and splits it at line feeds.
  Empty lines are kept.

### `vftext.line_divider`

A `LineDivider` takes a sequence of `LayoutItem`s, a `max_line_size` and
a `line_spacing`. Each `LayoutItem` holds an advance, a font size and a
code point. A `max_line_size` of 0 means no wrapping.

- `divide(start)` recomputes lines from the line holding character
  `start` onwards. It returns a read-only mapping from each line's first
  character index to its `LineData` (`width`, `height`, `y`).
- A new line starts at a line feed, or where the next advance would pass
  `max_line_size`.
- `line_of_character(index)` returns the line's start index together
  with its `LineData`.
- `lines` is the current read-only mapping of lines.

### `vftext.text_align`

`LeftTextAlign`, `CenterTextAlign` and `RightTextAlign` all derive from
`TextAlign`. Each one's `line_offset(line_size, max_line_size)` returns
an `(x, y)` offset. It raises `ValueError` if either size is negative,
or if the line is longer than the maximum.

### `vftext.glyph_mesh`

`GlyphMesh` holds a `vertices` list and several index buffers. A mesh
created without index buffers starts with ten empty ones.

- `add_vertex` appends a vertex.
- `set_indices` replaces one index buffer.
- `indices` returns one index buffer.
- `index_count` returns the length of one index buffer.
- `vertex_count` and `draw_count` are properties.
- An out-of-range buffer number raises `IndexError`.

### `vftext.bezier`

- `evaluate_quadratic(curve, t)` returns the point at parameter `t` of a
  `(start, control, end)` curve.
- `subdivide_quadratic_bezier(curve)` returns the sorted parameters at
  which to split the curve. It always contains 0.0, 0.5 and 1.0.
  Subdivision around a parameter stops once a neighbouring point is less
  than one unit away, or shares its x or y coordinate.

### `vftext.polygon`

Vertices are `(x, y)` tuples. An edge is a pair of vertex indices, and a
contour is a closed list of edges.

- `determinant` and `is_on_left_side` are plain geometric helpers.
- `intersect` returns the crossing point of two edges, or `None`.
- `is_point_on_edge` and `is_edge_on_edge` test whether a point or an
  edge lies on an edge.
- `resolve_self_intersections(vertices, contour, epsilon)` splits one
  contour into contours without self intersections. It returns the
  extended vertex list and the resulting contours.

### `vftext.polygon_operator`

`PolygonOperator(epsilon=1e-4)` unites two polygons that share one
vertex buffer. A negative epsilon raises `ValueError`.

`join(vertices, first, second)` returns a tuple of two items. The first
is the vertices: the input ones followed by any new intersection points.
The second is the contours of the union. After a join, both are also
available through the `vertices` and `polygon` properties.

## Example

```python
from vftext.unicode import utf8_to_utf32, utf32_to_utf16
from vftext.text_align import CenterTextAlign
from vftext.polygon_operator import PolygonOperator

code_points = utf8_to_utf32("héllo".encode("utf-8"))  # "héllo"
units = utf32_to_utf16(code_points)

offset = CenterTextAlign().line_offset(40.0, 100.0)  # (30.0, 0.0)

vertices = [(0, 0), (0, 2), (2, 2), (2, 0), (1, 1), (1, 3), (3, 3), (3, 1)]
square_a = [[(0, 1), (1, 2), (2, 3), (3, 0)]]
square_b = [[(4, 5), (5, 6), (6, 7), (7, 4)]]
points, contours = PolygonOperator().join(vertices, square_a, square_b)
```

## What it does not do

The package works only on geometry and code points that you supply.

- It does not load font files.
- It does not read glyph outlines.
- It does not shape text with a shaping engine; `vftext.shaper` only
  normalises text and splits it into lines.
- It does not triangulate outlines.
- It does not rasterize anything, draw to a screen or talk to a GPU.
- It does not keep editable text blocks or glyph caches.