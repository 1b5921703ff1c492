"""Glyph shape table and line composition built on the grid engine."""

from .shapes import (
    GLYPH_SHAPES, DIGIT_SHAPES, GlyphShape, glyph_builder,
    digit_builder, separator_builder, space_builder
)
from .line import LineBuilder, stitch_line, lines_to_text

__all__ = [
    'GLYPH_SHAPES',
    'DIGIT_SHAPES',
    'GlyphShape',
    'glyph_builder',
    'digit_builder',
    'separator_builder',
    'space_builder',
    'LineBuilder',
    'stitch_line',
    'lines_to_text',
]
