"""Tab-separated text serialization and parsing."""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from ..engines.type_inference import TypeInference
from ..utils.numeric import parse_number

LINE_BREAK = re.compile(r"\r?\n")


class TsvCodec:
    """
    Serializes tables to TSV text and parses TSV text into flat rows.

    TSV has no escaping here: tabs inside cells are replaced by spaces and
    line breaks by a single space on export, so that whitespace is lost.
    """

    def __init__(self, tab_replacement: str = "    ",
                 type_inference: Optional[TypeInference] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the TSV codec.

        Args:
            tab_replacement: Text substituted for tab characters inside cells
            type_inference: Optional TypeInference instance used for cell text
            logger: Optional logger instance
        """
        if "\t" in tab_replacement:
            raise ValueError("tab_replacement cannot contain a tab")
        self.tab_replacement = tab_replacement
        self.type_inference = type_inference or TypeInference()
        self.logger = logger or logging.getLogger(__name__)

    def to_tsv(self, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> str:
        """
        Serialize table data to TSV.

        Args:
            headers: Ordered headers
            rows: Row mappings of typed values or raw text

        Returns:
            Header line and one line per row joined by newlines, with no
            trailing newline; the empty string when there are no headers
        """
        if not headers:
            return ""

        lines = ["\t".join(headers)]
        for row in rows:
            lines.append("\t".join(self._cell_text(row.get(header)) for header in headers))

        return "\n".join(lines)

    def parse_tsv(self, text: str) -> List[Dict[str, Any]]:
        """
        Parse TSV text into flat rows.

        The first line holds the headers. Missing trailing fields become
        None. Present fields are trimmed and lightly typed: numbers,
        booleans (case-insensitive), ``null`` and blanks are recognized,
        but JSON structures are not parsed.

        Args:
            text: TSV text, typically pasted from a spreadsheet

        Returns:
            List of mappings from header to typed value
        """
        lines = [line for line in LINE_BREAK.split(text) if line.strip()]
        if len(lines) < 2:
            self.logger.debug("TSV text has no data lines")
            return []

        headers = [header.strip() for header in lines[0].split("\t")]
        result = []

        for line in lines[1:]:
            fields = line.split("\t")
            row: Dict[str, Any] = {}
            has_value = False

            for index, header in enumerate(headers):
                if index < len(fields):
                    row[header] = self._infer_pasted(fields[index])
                    has_value = True
                else:
                    row[header] = None

            if has_value:
                result.append(row)

        self.logger.info(f"Parsed {len(result)} TSV rows with {len(headers)} columns")
        return result

    def _cell_text(self, value: Any) -> str:
        text = self.type_inference.to_text(value)
        return (text.replace("\t", self.tab_replacement)
                .replace("\r\n", " ")
                .replace("\n", " "))

    @staticmethod
    def _infer_pasted(field: str) -> Any:
        """Type a pasted field; unlike cell inference, booleans ignore case."""
        value = field.strip()
        if value == "":
            return None

        number = parse_number(value)
        if number is not None:
            return number

        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        if value == "null":
            return None
        return value


def is_tabular_text(text: str) -> bool:
    """Check whether pasted text looks like tabular data (tabs or several lines)."""
    return "\t" in text or "\n" in text


_default_codec = TsvCodec()


def to_tsv(headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> str:
    """Serialize table data to TSV with the default codec."""
    return _default_codec.to_tsv(headers, rows)


def parse_tsv(text: str) -> List[Dict[str, Any]]:
    """Parse TSV text with the default codec."""
    return _default_codec.parse_tsv(text)
