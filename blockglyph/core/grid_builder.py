"""Builder that rasterizes block-space overrides into an immutable Grid.

Overrides are declared on a coarse grid of blocks. At build time every block
is expanded to a ``block_size x block_size`` square of cells, so the same
shape description renders at any scale.

Example:
    grid = (GridBuilder.with_default('.')
            .block_size(2)
            .blocks_in_x(3)
            .blocks_in_y(3)
            .set_block_sector(0, 0, '*')
            .set_block_sector(2, 2, '*')
            .build())

    str(grid) is then:

        **....
        **....
        ......
        ......
        ....**
        ....**
"""

import numpy as np
from typing import Any, Iterable, List, Tuple
import logging
from .grid import Grid

logger = logging.getLogger(__name__)

Override = Tuple[int, int, Any]


def _as_scalar(value: Any) -> np.ndarray:
    """Wrap value in a 0D object array so numpy never broadcasts into it."""
    scalar = np.empty((), dtype=object)
    scalar[()] = value
    return scalar


class GridBuilder:
    """Fluent configuration for a block grid.

    Every mutator returns the builder itself so calls can be chained. The
    builder can be reused: ``build`` does not consume or change it.
    """

    def __init__(self, default_value: Any = None):
        """Initialize a single-cell builder.

        Args:
            default_value: Value of every cell not covered by an override
        """
        self._block_size = 1
        self._blocks_in_x = 1
        self._blocks_in_y = 1
        self._default_value = default_value
        self._overrides: List[Override] = []

    @classmethod
    def with_default(cls, default_value: Any) -> 'GridBuilder':
        """Create a builder whose cells default to ``default_value``."""
        return cls(default_value)

    def block_size(self, size: int) -> 'GridBuilder':
        """Set how many cells make up one edge of a block.

        Raises:
            ValueError: If size is less than 1
        """
        if size < 1:
            raise ValueError(f"block_size must be at least 1, got {size}")

        self._block_size = size
        logger.debug(f"Block size set to {size}")
        return self

    def blocks_in_x(self, count: int) -> 'GridBuilder':
        """Set the number of blocks along the x axis.

        Raises:
            ValueError: If the resulting block grid would have no area
        """
        self._validate_extents(count, self._blocks_in_y)
        self._blocks_in_x = count
        return self

    def blocks_in_y(self, count: int) -> 'GridBuilder':
        """Set the number of blocks along the y axis.

        Raises:
            ValueError: If the resulting block grid would have no area
        """
        self._validate_extents(self._blocks_in_x, count)
        self._blocks_in_y = count
        return self

    @staticmethod
    def _validate_extents(blocks_in_x: int, blocks_in_y: int) -> None:
        # Zero on a single axis is rejected too: it would build a zero-area grid.
        if blocks_in_x < 1 and blocks_in_y < 1:
            raise ValueError(f"blocks_in_x and blocks_in_y must not both be zero, "
                             f"got {blocks_in_x}x{blocks_in_y}")
        if blocks_in_x < 1 or blocks_in_y < 1:
            raise ValueError(f"Block grid {blocks_in_x}x{blocks_in_y} has no area; "
                             f"blocks_in_x and blocks_in_y must be at least 1")

    def set_block_sector(self, x: int, y: int, value: Any) -> 'GridBuilder':
        """Fill block (x, y) with ``value`` when built.

        Overrides are kept in insertion order and never deduplicated; a later
        override of the same block wins.
        """
        self._overrides.append((x, y, value))
        return self

    def set_bulk_sectors(self, value: Any,
                         sectors: Iterable[Tuple[int, int]]) -> 'GridBuilder':
        """Fill every block in ``sectors`` with ``value``.

        Same as calling ``set_block_sector`` for each coordinate in order.
        Example: sector (1, 1) with block size 2 covers cells (2, 2), (3, 2),
        (2, 3) and (3, 3).
        """
        for x, y in sectors:
            self._overrides.append((x, y, value))
        return self

    def reset_sectors(self) -> 'GridBuilder':
        """Drop all overrides; size configuration is kept."""
        self._overrides.clear()
        return self

    @property
    def width(self) -> int:
        """Width in cells of the grid this builder produces."""
        return self._block_size * self._blocks_in_x

    @property
    def height(self) -> int:
        """Height in cells of the grid this builder produces."""
        return self._block_size * self._blocks_in_y

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        """(block_size, blocks_in_x, blocks_in_y)"""
        return (self._block_size, self._blocks_in_x, self._blocks_in_y)

    @property
    def default_value(self) -> Any:
        return self._default_value

    @property
    def overrides(self) -> Tuple[Override, ...]:
        """Overrides in insertion order."""
        return tuple(self._overrides)

    def build(self) -> Grid:
        """Rasterize the current configuration into a new Grid.

        Cells start at the default value. Overrides are then applied in
        insertion order, each filling its whole block, so later overrides
        replace earlier ones where they overlap.

        Returns:
            Grid of ``width`` x ``height`` cells

        Raises:
            IndexError: If an override lies outside the block grid
        """
        size = self._block_size
        cells = np.empty((self.height, self.width), dtype=object)
        cells[...] = _as_scalar(self._default_value)

        for x, y, value in self._overrides:
            if not (0 <= x < self._blocks_in_x and 0 <= y < self._blocks_in_y):
                raise IndexError(f"Block ({x}, {y}) out of bounds for "
                                 f"{self._blocks_in_x}x{self._blocks_in_y} block grid")

            top, left = y * size, x * size
            cells[top:top + size, left:left + size] = _as_scalar(value)

        logger.debug(f"Built {self.width}x{self.height} grid from "
                     f"{len(self._overrides)} overrides (block size {size})")
        return Grid(cells)

    def copy(self) -> 'GridBuilder':
        """Create an independent builder with the same configuration."""
        builder = GridBuilder(self._default_value)
        builder._block_size = self._block_size
        builder._blocks_in_x = self._blocks_in_x
        builder._blocks_in_y = self._blocks_in_y
        builder._overrides = list(self._overrides)
        return builder

    def __repr__(self) -> str:
        return (f"GridBuilder(block_size={self._block_size}, "
                f"blocks={self._blocks_in_x}x{self._blocks_in_y}, "
                f"overrides={len(self._overrides)})")
