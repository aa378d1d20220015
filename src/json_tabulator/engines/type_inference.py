"""Cell type inference and display formatting."""

import json
import logging
from typing import Any, Optional

from ..models.grid import GridCell, NULL_MARKER_TEXT
from ..types import CellKind
from ..utils.numeric import format_number, parse_number
from ..utils.validation import reject_json_constant


class TypeInference:
    """
    Converts raw cell text to typed values and typed values back to text.

    Inference never fails: anything that is not recognized as a null,
    boolean, number or JSON structure is kept as the original string.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the type inference engine.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def infer_type(self, value: Any) -> Any:
        """
        Infer a typed value from raw cell text.

        Rules, first match wins: None and blank text become None;
        ``true``/``false``/``null`` (case-sensitive) become bool or None;
        numeric text becomes a number; text wrapped in braces or brackets is
        parsed as JSON when valid; anything else is returned untrimmed.
        Values that are not strings are already typed and pass through.

        Args:
            value: Raw cell text or an already typed value

        Returns:
            The typed value
        """
        if value is None:
            return None
        if not isinstance(value, str):
            return value

        trimmed = value.strip()
        if trimmed == "":
            return None
        if trimmed == "true":
            return True
        if trimmed == "false":
            return False
        if trimmed == "null":
            return None

        number = parse_number(trimmed)
        if number is not None:
            return number

        if ((trimmed.startswith("{") and trimmed.endswith("}")) or
                (trimmed.startswith("[") and trimmed.endswith("]"))):
            try:
                return json.loads(trimmed, parse_constant=reject_json_constant)
            except ValueError:
                self.logger.debug(f"Cell text looks structured but is not JSON: {trimmed[:40]!r}")

        return value

    def to_text(self, value: Any) -> str:
        """
        Render a typed value as plain text.

        None becomes the empty string; objects and arrays become compact JSON.
        """
        kind = CellKind.classify(value)
        if kind is CellKind.NULL:
            return ""
        if kind is CellKind.BOOLEAN:
            return "true" if value else "false"
        if kind is CellKind.NUMBER:
            return format_number(value)
        if kind in (CellKind.OBJECT, CellKind.ARRAY):
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        return str(value)

    def format_cell(self, value: Any, present: bool = True) -> GridCell:
        """
        Render a typed value into an editable grid cell.

        Args:
            value: Typed cell value
            present: False when the row has no value at this header

        Returns:
            GridCell; a genuine None is shown as a flagged ``"null"`` marker
        """
        if not present:
            return GridCell(text="")
        if value is None:
            return GridCell(text=NULL_MARKER_TEXT, is_null_marker=True)
        return GridCell(text=self.to_text(value))


_default_inference = TypeInference()


def infer_type(value: Any) -> Any:
    """Infer a typed value from raw cell text."""
    return _default_inference.infer_type(value)


def to_text(value: Any) -> str:
    """Render a typed value as plain text."""
    return _default_inference.to_text(value)


def format_cell(value: Any, present: bool = True) -> GridCell:
    """Render a typed value into an editable grid cell."""
    return _default_inference.format_cell(value, present)
