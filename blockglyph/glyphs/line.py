"""Compose block glyphs into display lines.

A line is a list of rows, each row being the values of every glyph on that
row read left to right. Rows are what a text widget or ``print`` consumes.
"""

from typing import Any, List, Sequence
import logging
from ..config import RenderConfig
from ..core.grid import Grid
from ..core.grid_builder import GridBuilder
from .shapes import (
    GLYPH_SHAPES, digit_builder, glyph_builder,
    separator_builder, space_builder
)

logger = logging.getLogger(__name__)


def stitch_line(grids: Sequence[Grid]) -> List[List[Any]]:
    """Concatenate grids side by side into rows.

    The line is as tall as the tallest grid; shorter grids simply contribute
    nothing to the rows below their last one.

    Args:
        grids: Grids in display order

    Returns:
        One list of values per row
    """
    max_height = max((grid.height for grid in grids), default=0)
    return list(Grid.iter_top_left_to_bottom_right(grids, max_height))


def lines_to_text(lines: Sequence[Sequence[Any]]) -> List[str]:
    """Join the values of each row into a string."""
    return [''.join(str(value) for value in row) for row in lines]


class LineBuilder:
    """Queue of glyphs rendered as one line at a shared block size.

    Example:
        rows = (LineBuilder(2, '#', ' ')
                .number(12)
                .separator()
                .number(5)
                .build_line())
    """

    def __init__(self, block_size: int, taken_value: Any, default_value: Any):
        """Initialize an empty line.

        Args:
            block_size: Cells per block edge for every glyph
            taken_value: Value of cells covered by a glyph
            default_value: Value of all other cells

        Raises:
            ValueError: If block_size is less than 1
        """
        if block_size < 1:
            raise ValueError(f"block_size must be at least 1, got {block_size}")

        self.block_size = block_size
        self.taken_value = taken_value
        self.default_value = default_value
        self.builders: List[GridBuilder] = []

    @classmethod
    def from_config(cls, config: RenderConfig) -> 'LineBuilder':
        """Create a line using the values of ``config``."""
        return cls(config.block_size, config.taken_value, config.default_value)

    def digit(self, digit: int) -> 'LineBuilder':
        """Append a single digit glyph (0-9)."""
        self.builders.append(digit_builder(digit, self.default_value, self.taken_value))
        return self

    def separator(self) -> 'LineBuilder':
        """Append a ':' glyph."""
        self.builders.append(separator_builder(self.default_value, self.taken_value))
        return self

    def space(self) -> 'LineBuilder':
        """Append a one block wide gap."""
        self.builders.append(space_builder(self.default_value))
        return self

    def glyph(self, char: str) -> 'LineBuilder':
        """Append the glyph drawn for ``char``.

        Raises:
            ValueError: If no glyph exists for char
        """
        shape = GLYPH_SHAPES.get(char)
        if shape is None:
            raise ValueError(f"No glyph for character {char!r}")
        self.builders.append(glyph_builder(shape, self.default_value, self.taken_value))
        return self

    def text(self, text: str) -> 'LineBuilder':
        """Append one glyph per character of ``text``, without extra spacing.

        Only digits, ':' and ' ' are drawable. Nothing is appended if any
        character is unknown.

        Raises:
            ValueError: If text contains a character with no glyph
        """
        unknown = [char for char in text if char not in GLYPH_SHAPES]
        if unknown:
            raise ValueError(f"No glyph for character {unknown[0]!r} in {text!r}")

        for char in text:
            self.glyph(char)
        return self

    def number(self, number: int) -> 'LineBuilder':
        """Append the decimal digits of ``number`` separated by spaces.

        Raises:
            ValueError: If number is not a non-negative integer
        """
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError(f"number must be a non-negative integer, got {number!r}")

        # Least significant digit first, flipped into display order below
        buffer: List[GridBuilder] = []
        while True:
            buffer.append(digit_builder(number % 10, self.default_value, self.taken_value))
            buffer.append(space_builder(self.default_value))
            number //= 10
            if number == 0:
                break

        buffer.pop()
        buffer.reverse()
        self.builders.extend(buffer)
        return self

    def clear(self) -> 'LineBuilder':
        """Drop all queued glyphs."""
        self.builders.clear()
        return self

    def build_grids(self) -> List[Grid]:
        """Build every queued glyph at the line's block size."""
        return [builder.block_size(self.block_size).build() for builder in self.builders]

    def build_line(self) -> List[List[Any]]:
        """Render the queued glyphs as rows of values.

        Returns:
            One list of values per row; empty if no glyph was queued
        """
        grids = self.build_grids()
        lines = stitch_line(grids)
        logger.debug(f"Composed {len(grids)} glyphs into {len(lines)} rows "
                     f"(block size {self.block_size})")
        return lines

    def __len__(self) -> int:
        return len(self.builders)

    def __repr__(self) -> str:
        return f"LineBuilder(glyphs={len(self.builders)}, block_size={self.block_size})"
