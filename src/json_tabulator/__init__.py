"""
JSON Tabulator - Bidirectional JSON/table conversion.

Flattens nested JSON documents into key-path tables, rebuilds documents
from edited tables, and exchanges tables as tab-separated text.
"""

__version__ = "1.0.0"

from .converter import JSONTableConverter
from .workspace import Workspace
from .models import Table, Grid, GridCell, render_grid
from .engines import flatten, unflatten, infer_type, format_cell
from .processors import transpose
from .io import to_tsv, parse_tsv
from .types import ConversionResult, ProcessingError, StructuredParseError

__all__ = [
    "JSONTableConverter",
    "Workspace",
    "Table",
    "Grid",
    "GridCell",
    "render_grid",
    "flatten",
    "unflatten",
    "infer_type",
    "format_cell",
    "transpose",
    "to_tsv",
    "parse_tsv",
    "ConversionResult",
    "ProcessingError",
    "StructuredParseError",
]
