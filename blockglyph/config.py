"""Rendering defaults shared by the line composer and the demo script."""

from typing import Any


DEFAULT_BLOCK_SIZE = 2
DEFAULT_TAKEN_VALUE = '█'
DEFAULT_EMPTY_VALUE = ' '


class RenderConfig:
    """Configuration for rendering a line of block glyphs."""

    def __init__(self,
                 block_size: int = DEFAULT_BLOCK_SIZE,
                 taken_value: Any = DEFAULT_TAKEN_VALUE,
                 default_value: Any = DEFAULT_EMPTY_VALUE):
        """Initialize render configuration.

        Args:
            block_size: Cells per block edge applied to every glyph (1+)
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

    def copy(self) -> 'RenderConfig':
        """Create a copy of the configuration."""
        return RenderConfig(
            block_size=self.block_size,
            taken_value=self.taken_value,
            default_value=self.default_value
        )

    def __repr__(self) -> str:
        return (f"RenderConfig(block_size={self.block_size}, "
                f"taken={self.taken_value!r}, default={self.default_value!r})")
