"""Horizontal alignment of text lines."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextAlign(ABC):
    """Computes how far a line is shifted from the left edge."""

    @staticmethod
    def _validate(line_size: float, max_line_size: float) -> None:
        if line_size < 0 or max_line_size < 0:
            raise ValueError("line sizes must be positive")
        if line_size > max_line_size:
            raise ValueError("max line size must be bigger than line size")

    @abstractmethod
    def line_offset(self, line_size: float, max_line_size: float) -> tuple[float, float]:
        """Return the (x, y) offset of a line of ``line_size`` in a box of ``max_line_size``."""


class LeftTextAlign(TextAlign):
    """Lines start at the left edge."""

    def line_offset(self, line_size: float, max_line_size: float) -> tuple[float, float]:
        self._validate(line_size, max_line_size)
        return (0.0, 0.0)


class CenterTextAlign(TextAlign):
    """Lines are centred."""

    def line_offset(self, line_size: float, max_line_size: float) -> tuple[float, float]:
        self._validate(line_size, max_line_size)
        return ((max_line_size - line_size) / 2.0, 0.0)


class RightTextAlign(TextAlign):
    """Lines end at the right edge."""

    def line_offset(self, line_size: float, max_line_size: float) -> tuple[float, float]:
        self._validate(line_size, max_line_size)
        return (float(max_line_size - line_size), 0.0)