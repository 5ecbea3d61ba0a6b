"""Text layout and glyph geometry: UTF conversions, text normalisation, line breaking, alignment, Bezier subdivision and polygon union."""

__version__ = "0.1.0"