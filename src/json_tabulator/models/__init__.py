"""Data models for the JSON Tabulator."""

from .table import Table
from .grid import Grid, GridCell, render_grid

__all__ = ["Table", "Grid", "GridCell", "render_grid"]
