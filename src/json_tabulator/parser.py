"""JSON document parser with human-readable errors."""

import json
import logging
from typing import Any, Optional
from .types import StructuredParseError
from .error_handler import ErrorHandler
from .utils import reject_json_constant


class JSONParser:
    """
    Parses document text into documents and serializes documents back.

    Parsing is the only fallible step of a conversion: malformed text raises
    StructuredParseError carrying the decoder's message and position.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None,
                 indent: int = 2):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
            indent: Indentation used when pretty-printing
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)
        self.indent = indent

    def parse(self, json_string: str) -> Any:
        """
        Parse JSON document text.

        Args:
            json_string: JSON string to parse

        Returns:
            The parsed document

        Raises:
            StructuredParseError: If the text is empty or not valid JSON
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid and validation_result.errors[0].location == "input":
            raise StructuredParseError(f"Invalid JSON: {validation_result.errors[0].message}")

        # syntax errors are re-raised from the decoder to keep their position
        try:
            data = json.loads(json_string, parse_constant=reject_json_constant)
        except json.JSONDecodeError as e:
            raise StructuredParseError(
                f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                lineno=e.lineno,
                colno=e.colno
            ) from e
        except ValueError as e:
            raise StructuredParseError(f"Invalid JSON: {e}") from e

        self.logger.debug(f"Parsed JSON document with {type(data).__name__} root")
        return data

    def dumps(self, data: Any, pretty: bool = True) -> str:
        """Serialize a document, indented or compact."""
        if pretty:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    def prettify(self, json_string: str) -> str:
        """Re-indent document text. Raises StructuredParseError when invalid."""
        return self.dumps(self.parse(json_string), pretty=True)

    def minify(self, json_string: str) -> str:
        """Remove insignificant whitespace. Raises StructuredParseError when invalid."""
        return self.dumps(self.parse(json_string), pretty=False)
