"""Division of laid-out characters into lines."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

LINE_FEED = 0x0A


@dataclass(frozen=True)
class LayoutItem:
    """What line division needs to know about one character."""

    advance: tuple[float, float]
    font_size: float
    code_point: int = 0


@dataclass
class LineData:
    """Width, height and baseline y coordinate of one line."""

    width: float
    height: float
    y: float


class LineDivider:
    """Splits characters into lines by line feeds and an optional maximum width.

    Lines are keyed by the index of their first character.
    """

    def __init__(
        self,
        characters: Iterable[LayoutItem] = (),
        max_line_size: float = 0.0,
        line_spacing: float = 1.0,
    ) -> None:
        self._characters: list[LayoutItem] = list(characters)
        self.max_line_size = max_line_size
        self.line_spacing = line_spacing
        self._lines: dict[int, LineData] = {}

    @property
    def characters(self) -> list[LayoutItem]:
        return self._characters

    @characters.setter
    def characters(self, characters: Iterable[LayoutItem]) -> None:
        self._characters = list(characters)

    @property
    def lines(self) -> Mapping[int, LineData]:
        return MappingProxyType(self._lines)

    def _line_start_before(self, index: int) -> int | None:
        keys = list(self._lines)
        position = bisect_right(keys, index)
        return keys[position - 1] if position else None

    def divide(self, start: int) -> Mapping[int, LineData]:
        """Recompute lines from the line holding character ``start`` onwards."""
        if not 0 <= start < len(self._characters):
            raise IndexError("start index is out of bounds")

        first = 0
        line_start = self._line_start_before(start) if self._lines else None
        if line_start is not None:
            first = line_start
            for key in [k for k in self._lines if k >= first]:
                del self._lines[key]

        head = self._characters[first]
        if self._lines:
            y = next(reversed(self._lines.values())).y + head.font_size
        else:
            y = float(head.font_size)
        current = LineData(float(head.advance[0]), head.font_size, y)
        self._lines[first] = current

        pen_x, pen_y = current.width, current.y
        for index, item in enumerate(self._characters[first + 1 :], start=first + 1):
            advance_x, advance_y = item.advance
            wraps = self.max_line_size > 0 and pen_x + advance_x > self.max_line_size
            if wraps or item.code_point == LINE_FEED:
                pen_x = advance_x
                pen_y += item.font_size * self.line_spacing
                current = LineData(float(advance_x), item.font_size, pen_y)
                self._lines[index] = current
                continue

            pen_x += advance_x
            pen_y += advance_y
            current.width += advance_x

            if item.font_size > current.height:
                current.y += (item.font_size - current.height) * self.line_spacing
                current.height = item.font_size
                pen_y = current.y

        return self.lines

    def line_of_character(self, index: int) -> tuple[int, LineData]:
        """Return the start index and data of the line holding character ``index``."""
        if not self._lines:
            raise IndexError("character index is out of bounds")
        line_start = self._line_start_before(index)
        if line_start is None:
            raise LookupError("such line does not exist")
        return line_start, self._lines[line_start]