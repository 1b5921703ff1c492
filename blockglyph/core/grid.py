"""Immutable block grid used as the raster for large glyphs.

This module implements the read side of the composition engine. A grid is a
frozen 2D array of arbitrary values (characters, styled spans, colour codes)
produced by ``GridBuilder.build``. Several grids can be traversed row by row as
if they were one continuous raster, which is how glyphs are laid out side by
side on a single display line.
"""

import numpy as np
from typing import Any, Iterator, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class Grid:
    """Read-only 2D grid of values addressed by (x, y).

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
    """

    def __init__(self, cells: np.ndarray):
        """Freeze the given cell array into a grid.

        Grids are normally produced by ``GridBuilder.build``; the array is
        copied so later changes to ``cells`` are not visible through the grid.

        Args:
            cells: 2D array indexed as cells[y, x]

        Raises:
            ValueError: If cells is not a non-empty 2D array
        """
        if cells.ndim != 2:
            raise ValueError(f"Grid cells must be 2D, got {cells.ndim}D")
        if cells.size == 0:
            raise ValueError(f"Grid cells cannot be empty, got shape {cells.shape}")

        self._cells = cells.copy()
        self._cells.setflags(write=False)

    @property
    def width(self) -> int:
        """Number of cells along the x axis."""
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        """Number of cells along the y axis."""
        return self._cells.shape[0]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int, default: Any = None) -> Any:
        """Get cell value at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            default: Returned when (x, y) lies outside the grid

        Returns:
            The stored value, or ``default`` if out of bounds
        """
        if not self._in_bounds(x, y):
            return default
        return self._cells[y, x]

    def get_row(self, y: int) -> Optional[np.ndarray]:
        """Get all values along row ``y`` as a read-only view.

        Returns:
            Row of ``width`` values, or None if y is out of bounds
        """
        if not 0 <= y < self.height:
            return None
        return self._cells[y]

    def iter_rows(self) -> Iterator[np.ndarray]:
        """Yield every row, top to bottom. Each call starts a fresh pass."""
        for y in range(self.height):
            yield self._cells[y]

    def __iter__(self) -> Iterator[np.ndarray]:
        return self.iter_rows()

    @staticmethod
    def iter_along_row(grids: Sequence['Grid'], y: int) -> Iterator[Any]:
        """Yield row ``y`` of every grid, left to right, as one sequence.

        Grids that are not tall enough to have row ``y`` contribute nothing.
        This lets several grids be read as if they were a single wide grid.

        Args:
            grids: Grids in display order (left to right)
            y: Row index shared by all grids
        """
        for grid in grids:
            row = grid.get_row(y)
            if row is None:
                continue
            yield from row

    @staticmethod
    def iter_top_left_to_bottom_right(grids: Sequence['Grid'],
                                      max_rows: int) -> Iterator[List[Any]]:
        """Yield the concatenated rows of ``grids`` for rows 0 to max_rows - 1.

        Args:
            grids: Grids in display order (left to right)
            max_rows: Number of rows to produce

        Returns:
            Iterator of lists, one list of values per row
        """
        for y in range(max_rows):
            yield list(Grid.iter_along_row(grids, y))

    def to_array(self) -> np.ndarray:
        """Get a writable copy of the cells (indexed [y, x])."""
        return self._cells.copy()

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return NotImplemented
        if self._cells.shape != other._cells.shape:
            return False
        return all(a == b for a, b in zip(self._cells.flat, other._cells.flat))

    def __str__(self) -> str:
        """Render rows as lines of concatenated values."""
        return '\n'.join(''.join(str(value) for value in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
