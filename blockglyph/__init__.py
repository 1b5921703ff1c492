"""
blockglyph: large block glyphs for character-cell displays

Builds digits, a ':' separator and blank space out of square blocks of
cells, scales them by block size and stitches several glyphs into display
lines. Values are generic: characters, styled spans or colour codes.
"""

from .config import RenderConfig
from .core.grid import Grid
from .core.grid_builder import GridBuilder
from .glyphs.line import LineBuilder, lines_to_text, stitch_line
from .glyphs.shapes import GLYPH_SHAPES, DIGIT_SHAPES, GlyphShape, glyph_builder

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'GridBuilder',
    'GlyphShape',
    'GLYPH_SHAPES',
    'DIGIT_SHAPES',
    'glyph_builder',
    'LineBuilder',
    'stitch_line',
    'lines_to_text',
    'RenderConfig',
]
