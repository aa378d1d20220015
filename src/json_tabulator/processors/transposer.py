"""Table transposition with synthetic header labels."""

import logging
from typing import Any, Dict, Optional, Sequence, Set

from ..engines.type_inference import TypeInference
from ..models import Table
from ..types import CellKind, TableProcessorInterface

SYNTHETIC_LABEL = "Column {}"


class Transposer(TableProcessorInterface):
    """
    Swaps the row and column axes of a table.

    The first header is the pivot: its column supplies the new headers, and
    the remaining headers become the pivot values of the new rows. The
    transpose is only its own inverse when every pivot cell was a unique,
    non-blank scalar, since otherwise labels are synthesized.
    """

    def __init__(self, type_inference: Optional[TypeInference] = None,
                 logger: Optional[logging.Logger] = None):
        self.type_inference = type_inference or TypeInference()
        self.logger = logger or logging.getLogger(__name__)

    def process(self, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> Table:
        return self.transpose(headers, rows)

    def transpose(self, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> Table:
        """
        Transpose table data.

        Args:
            headers: Ordered headers; the first one is the pivot
            rows: Row mappings

        Returns:
            New Table with one row per non-pivot header
        """
        if not headers:
            return Table()

        pivot = headers[0]
        new_headers = [pivot]
        taken: Set[str] = {pivot}

        for index, row in enumerate(rows):
            label = self._unique_label(self.row_label(row.get(pivot), index), taken)
            new_headers.append(label)
            taken.add(label)

        new_rows = []
        for header in headers[1:]:
            new_row: Dict[str, Any] = {pivot: header}
            for label, row in zip(new_headers[1:], rows):
                if header in row:
                    new_row[label] = row[header]
            new_rows.append(new_row)

        self.logger.info(f"Transposed {len(rows)}x{len(headers)} table into "
                         f"{len(new_rows)}x{len(new_headers)}")
        return Table(headers=new_headers, rows=new_rows)

    def row_label(self, value: Any, index: int) -> str:
        """Derive the header label for the row at ``index`` from its pivot cell."""
        kind = CellKind.classify(value)
        if kind in (CellKind.NULL, CellKind.OBJECT, CellKind.ARRAY):
            return SYNTHETIC_LABEL.format(index + 1)

        text = self.type_inference.to_text(value)
        if not text.strip():
            return SYNTHETIC_LABEL.format(index + 1)
        return text

    @staticmethod
    def _unique_label(candidate: str, taken: Set[str]) -> str:
        if candidate not in taken:
            return candidate
        suffix = 2
        while f"{candidate} {suffix}" in taken:
            suffix += 1
        return f"{candidate} {suffix}"


def transpose(headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> Table:
    """Transpose table data with a default Transposer."""
    return Transposer().transpose(headers, rows)
