"""Tests for the glyph shape table and shape-to-builder conversion."""

import pytest
from blockglyph.glyphs.shapes import (
    GLYPH_SHAPES, DIGIT_SHAPES, GlyphShape, glyph_builder,
    digit_builder, separator_builder, space_builder
)


def _lines(grid) -> list:
    return [''.join(row) for row in grid.iter_rows()]


EXPECTED_DIGITS = {
    0: ['***', '* *', '* *', '* *', '***'],
    1: ['  *', '  *', '  *', '  *', '  *'],
    2: ['***', '  *', '***', '*  ', '***'],
    3: ['***', '  *', '***', '  *', '***'],
    4: ['* *', '* *', '***', '  *', '  *'],
    5: ['***', '*  ', '***', '  *', '***'],
    6: ['***', '*  ', '***', '* *', '***'],
    7: ['***', '  *', '  *', '  *', '  *'],
    8: ['***', '* *', '***', '* *', '***'],
    9: ['***', '* *', '***', '  *', '***'],
}


class TestGlyphTable:
    """Test the declarative shape table."""

    def test_all_symbols_present(self):
        """Digits, separator and space are drawable."""
        assert set(GLYPH_SHAPES) == set('0123456789: ')
        assert set(DIGIT_SHAPES) == set(range(10))

    def test_digit_shapes_share_table_entries(self):
        """Digit lookup is a view of the character table."""
        for digit in range(10):
            assert DIGIT_SHAPES[digit] is GLYPH_SHAPES[str(digit)]

    def test_tables_are_read_only(self):
        """Lookup tables cannot be modified after import."""
        with pytest.raises(TypeError):
            GLYPH_SHAPES['x'] = GLYPH_SHAPES['1']

        with pytest.raises(TypeError):
            DIGIT_SHAPES[10] = DIGIT_SHAPES[1]

    def test_digit_box(self):
        """Every digit lives in a 3x5 block box."""
        for shape in DIGIT_SHAPES.values():
            assert (shape.blocks_in_x, shape.blocks_in_y) == (3, 5)

    def test_sector_outside_box_rejected(self):
        """Shapes validate their sectors against the box."""
        with pytest.raises(ValueError, match="outside 3x5 box"):
            GlyphShape('bad', 3, 5, ((3, 0),))

    def test_shapes_are_frozen(self):
        """Shapes are immutable values."""
        shape = GLYPH_SHAPES['1']

        with pytest.raises(AttributeError):
            shape.blocks_in_x = 4


class TestGlyphBuilders:
    """Test rendering of each glyph."""

    @pytest.mark.parametrize("digit", range(10))
    def test_digit(self, digit):
        """Each digit draws its expected 3x5 pattern."""
        grid = digit_builder(digit, ' ', '*').build()

        assert _lines(grid) == EXPECTED_DIGITS[digit]

    def test_unknown_digit(self):
        """Only 0-9 have glyphs."""
        with pytest.raises(ValueError, match="No glyph for digit 10"):
            digit_builder(10, ' ', '*')

    def test_separator(self):
        """Separator is two dots in the middle column."""
        grid = separator_builder(' ', '*').build()

        assert _lines(grid) == ['   ', ' * ', '   ', ' * ', '   ']

    def test_space(self):
        """Space is a blank column one block wide and three tall."""
        grid = space_builder('.').build()

        assert (grid.width, grid.height) == (1, 3)
        assert _lines(grid) == ['.', '.', '.']

    def test_glyph_builder_is_configurable(self):
        """Builders from shapes can be rescaled before building."""
        grid = glyph_builder(GLYPH_SHAPES['7'], ' ', '#').block_size(2).build()

        assert (grid.width, grid.height) == (6, 10)
        assert _lines(grid)[:4] == ['######', '######', '    ##', '    ##']

    def test_glyph_builder_generic_values(self):
        """Any value type can be used for the cells."""
        grid = glyph_builder(GLYPH_SHAPES['1'], 0, 1).build()

        assert [list(row) for row in grid.iter_rows()] == [[0, 0, 1]] * 5

    def test_builders_are_independent(self):
        """Each call returns a fresh builder."""
        first = digit_builder(1, ' ', '*')
        second = digit_builder(1, ' ', '*')

        first.reset_sectors()

        assert len(second.overrides) == 5
