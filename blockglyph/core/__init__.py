"""Grid composition engine: immutable grids and the block rasterizer."""

from .grid import Grid
from .grid_builder import GridBuilder

__all__ = ['Grid', 'GridBuilder']
