"""Block shape definitions for digits, the separator and blank space.

Each glyph is described once as the set of occupied blocks inside a fixed
bounding box. Digits and the separator use a 3x5 block box; the space glyph
is a 1x3 column with nothing set. ``glyph_builder`` turns any shape into a
configured ``GridBuilder`` for a given pair of values, so glyphs can be made
of characters, styled spans or anything else.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple
import logging
from ..core.grid_builder import GridBuilder

logger = logging.getLogger(__name__)

Sector = Tuple[int, int]

# Named block positions of the 3x5 digit box
TOP_LEFT: Sector = (0, 0)
TOP_CENTER: Sector = (1, 0)
TOP_RIGHT: Sector = (2, 0)

UPPER_LEFT: Sector = (0, 1)
UPPER_RIGHT: Sector = (2, 1)

MIDDLE_LEFT: Sector = (0, 2)
MIDDLE_CENTER: Sector = (1, 2)
MIDDLE_RIGHT: Sector = (2, 2)

LOWER_LEFT: Sector = (0, 3)
LOWER_RIGHT: Sector = (2, 3)

BOTTOM_LEFT: Sector = (0, 4)
BOTTOM_CENTER: Sector = (1, 4)
BOTTOM_RIGHT: Sector = (2, 4)

DIGIT_BLOCKS_X = 3
DIGIT_BLOCKS_Y = 5

SEPARATOR = ':'
SPACE = ' '


@dataclass(frozen=True)
class GlyphShape:
    """Occupied blocks of a glyph inside its bounding box."""
    name: str
    blocks_in_x: int
    blocks_in_y: int
    sectors: Tuple[Sector, ...] = ()

    def __post_init__(self):
        for x, y in self.sectors:
            if not (0 <= x < self.blocks_in_x and 0 <= y < self.blocks_in_y):
                raise ValueError(f"Sector ({x}, {y}) of glyph {self.name!r} outside "
                                 f"{self.blocks_in_x}x{self.blocks_in_y} box")


def _digit(name: str, *sectors: Sector) -> GlyphShape:
    return GlyphShape(name, DIGIT_BLOCKS_X, DIGIT_BLOCKS_Y, sectors)


# Rows of each table below read top to bottom like the rendered glyph.
GLYPH_SHAPES: Mapping[str, GlyphShape] = MappingProxyType({
    '0': _digit('0',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_LEFT, UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_RIGHT,
                LOWER_LEFT, LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '1': _digit('1',
                TOP_RIGHT,
                UPPER_RIGHT,
                MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_RIGHT),
    '2': _digit('2',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_LEFT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '3': _digit('3',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '4': _digit('4',
                TOP_LEFT, TOP_RIGHT,
                UPPER_LEFT, UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_RIGHT),
    '5': _digit('5',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_LEFT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '6': _digit('6',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_LEFT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_LEFT, LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '7': _digit('7',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_RIGHT,
                MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_RIGHT),
    '8': _digit('8',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_LEFT, UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_LEFT, LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    '9': _digit('9',
                TOP_LEFT, TOP_CENTER, TOP_RIGHT,
                UPPER_LEFT, UPPER_RIGHT,
                MIDDLE_LEFT, MIDDLE_CENTER, MIDDLE_RIGHT,
                LOWER_RIGHT,
                BOTTOM_LEFT, BOTTOM_CENTER, BOTTOM_RIGHT),
    SEPARATOR: _digit('separator', (1, 1), (1, 3)),
    SPACE: GlyphShape('space', 1, 3),
})

DIGIT_SHAPES: Mapping[int, GlyphShape] = MappingProxyType(
    {digit: GLYPH_SHAPES[str(digit)] for digit in range(10)}
)


def glyph_builder(shape: GlyphShape, default_value: Any,
                  taken_value: Optional[Any] = None) -> GridBuilder:
    """Create a builder drawing ``shape`` at block size 1.

    Args:
        shape: Glyph to draw
        default_value: Value of empty cells
        taken_value: Value of occupied cells (unused by shapes with no sectors)

    Returns:
        Configured builder; callers may change its block size before building
    """
    builder = (GridBuilder.with_default(default_value)
               .block_size(1)
               .blocks_in_x(shape.blocks_in_x)
               .blocks_in_y(shape.blocks_in_y))
    if shape.sectors:
        builder.set_bulk_sectors(taken_value, shape.sectors)
    return builder


def digit_builder(digit: int, default_value: Any, taken_value: Any) -> GridBuilder:
    """Builder for a single decimal digit.

    Raises:
        ValueError: If digit is not in 0-9
    """
    shape = DIGIT_SHAPES.get(digit)
    if shape is None:
        raise ValueError(f"No glyph for digit {digit!r}")
    return glyph_builder(shape, default_value, taken_value)


def separator_builder(default_value: Any, taken_value: Any) -> GridBuilder:
    """Builder for the ':' separator (two dots in the middle column)."""
    return glyph_builder(GLYPH_SHAPES[SEPARATOR], default_value, taken_value)


def space_builder(default_value: Any) -> GridBuilder:
    """Builder for a one block wide blank column."""
    return glyph_builder(GLYPH_SHAPES[SPACE], default_value)
