"""Editable grid model: raw cell text plus the null-marker flag."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

NULL_MARKER_TEXT = "null"


@dataclass
class GridCell:
    """
    One editable cell as displayed to the user.

    ``is_null_marker`` is set when the cell shows ``"null"`` because the
    underlying value is a genuine null, so read-back can tell it apart from
    the same four characters typed by a user.
    """

    text: str = ""
    is_null_marker: bool = False

    def __post_init__(self):
        """Validate cell after initialization."""
        if not isinstance(self.text, str):
            raise ValueError("text must be a string")
        if self.is_null_marker and self.text != NULL_MARKER_TEXT:
            raise ValueError(f"null marker cells must display '{NULL_MARKER_TEXT}'")

    def read(self) -> Optional[str]:
        """Return the raw text, or None for a null marker cell."""
        return None if self.is_null_marker else self.text


@dataclass
class Grid:
    """Headers plus rows of grid cells, keyed by header."""

    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, GridCell]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.headers

    def get_table_data(self) -> Tuple[List[str], List[Dict[str, Optional[str]]]]:
        """
        Extract headers and raw cell text.

        Returns:
            Tuple of (headers, rows) where each row maps every header to its
            cell text; null marker cells read back as None
        """
        rows = []
        for grid_row in self.rows:
            rows.append({
                header: grid_row.get(header, GridCell()).read()
                for header in self.headers
            })
        return list(self.headers), rows

    def set_cell_text(self, row_index: int, header: str, text: str) -> None:
        """
        Replace a cell's text as a user edit would.

        The null marker flag is cleared: typed text is always plain text.

        Raises:
            IndexError: If the row does not exist
            KeyError: If the header does not exist
        """
        if header not in self.headers:
            raise KeyError(header)
        self.rows[row_index][header] = GridCell(text=text)

    def cell(self, row_index: int, header: str) -> GridCell:
        return self.rows[row_index].get(header, GridCell())


def render_grid(headers: List[str], rows: List[Dict[str, Any]]) -> Grid:
    """
    Render typed table rows into an editable grid.

    Args:
        headers: Ordered header key paths
        rows: Row mappings of typed values; a header may be absent

    Returns:
        Grid whose cells carry display text and null-marker flags
    """
    from ..engines.type_inference import format_cell

    grid_rows = []
    for row in rows:
        grid_rows.append({
            header: format_cell(row.get(header), present=header in row)
            for header in headers
        })
    return Grid(headers=list(headers), rows=grid_rows)
