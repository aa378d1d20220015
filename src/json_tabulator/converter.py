"""Main JSON Tabulator facade."""

import logging
from contextlib import nullcontext
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from .types import (
    ConverterInterface,
    ConversionResult,
    ProcessingError,
    ErrorType
)
from .parser import JSONParser
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler
from .engines import PathCodec, TypeInference
from .processors import TableProjector, Transposer
from .io import TsvCodec
from .models import Table
from .utils import ValidationUtils


class JSONTableConverter(ConverterInterface):
    """
    Main implementation of the converter interface.

    Wires the parser, path codec, type inference, projector, transposer and
    TSV codec together. The text-to-text methods never raise: failures are
    reported through ``ConversionResult.errors``.
    """

    def __init__(self, indent: int = 2,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False,
                 separator: str = "."):
        """
        Initialize the converter.

        Args:
            indent: Indentation of JSON output
            logger: Optional logger instance
            enable_profiling: Record timing and memory of each conversion
            separator: Key-path segment separator
        """
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger, indent=indent)
        self.path_codec = PathCodec(separator=separator, logger=self.logger)
        self.type_inference = TypeInference(self.logger)
        self.projector = TableProjector(self.path_codec, self.type_inference, self.logger)
        self.transposer = Transposer(self.type_inference, self.logger)
        self.tsv_codec = TsvCodec(type_inference=self.type_inference, logger=self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    # Structured helpers

    def json_to_table(self, json_string: str) -> Table:
        """
        Parse document text and project it onto a table.

        Raises:
            StructuredParseError: If the text is not valid JSON
        """
        return self.projector.to_table(self.parser.parse(json_string))

    def table_to_documents(self, headers: Sequence[str],
                           rows: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Rebuild documents from table data.

        Raises:
            ProcessingError: If headers are duplicated or not text
        """
        validation = self.error_handler.validate_table(headers, rows)
        if not validation.is_valid:
            errors, warnings = ValidationUtils.split_messages(validation)
            raise ProcessingError(
                "; ".join(errors),
                ErrorType.STRUCTURE,
                context={"headers": list(headers), "warnings": warnings}
            )
        return self.projector.from_table(headers, rows)

    def table_to_json(self, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> str:
        """Rebuild documents from table data and serialize them with indentation."""
        return self.parser.dumps(self.table_to_documents(headers, rows))

    def tsv_to_documents(self, tsv_text: str) -> List[Dict[str, Any]]:
        """Parse TSV text and unflatten each row into a document."""
        return [self.path_codec.unflatten(row) for row in self.tsv_codec.parse_tsv(tsv_text)]

    # Text conversions

    def json_to_tsv(self, json_string: str) -> ConversionResult:
        """
        Convert JSON document text to TSV.

        Args:
            json_string: JSON document text

        Returns:
            ConversionResult holding the TSV text
        """
        def convert() -> Tuple[str, int, int]:
            table = self.json_to_table(json_string)
            return self.tsv_codec.to_tsv(table.headers, table.rows), table.row_count, table.column_count

        return self._run("json_to_tsv", json_string, convert)

    def tsv_to_json(self, tsv_text: str) -> ConversionResult:
        """
        Convert TSV text to an indented JSON array.

        Args:
            tsv_text: TSV text whose first line holds key-path headers

        Returns:
            ConversionResult holding the JSON text
        """
        def convert() -> Tuple[str, int, int]:
            rows = self.tsv_codec.parse_tsv(tsv_text)
            documents = [self.path_codec.unflatten(row) for row in rows]
            column_count = len(rows[0]) if rows else 0
            return self.parser.dumps(documents), len(documents), column_count

        return self._run("tsv_to_json", tsv_text, convert)

    def transpose_tsv(self, tsv_text: str) -> ConversionResult:
        """
        Swap the row and column axes of TSV text.

        The first column supplies the new headers.
        """
        def convert() -> Tuple[str, int, int]:
            rows = self.tsv_codec.parse_tsv(tsv_text)
            headers = list(rows[0]) if rows else []
            table = self.transposer.transpose(headers, rows)
            return self.tsv_codec.to_tsv(table.headers, table.rows), table.row_count, table.column_count

        return self._run("transpose_tsv", tsv_text, convert)

    def prettify(self, json_string: str) -> ConversionResult:
        """Re-indent JSON document text."""
        return self._run("prettify", json_string,
                         lambda: (self.parser.prettify(json_string), 0, 0))

    def minify(self, json_string: str) -> ConversionResult:
        """Strip insignificant whitespace from JSON document text."""
        return self._run("minify", json_string,
                         lambda: (self.parser.minify(json_string), 0, 0))

    def _run(self, operation_name: str, input_text: str,
             convert: Callable[[], Tuple[str, int, int]]) -> ConversionResult:
        """Run a conversion with profiling and error reporting."""
        input_size = len(input_text.encode("utf-8")) if isinstance(input_text, str) else 0
        profile = (self.profiler.profile_operation(operation_name, input_size)
                   if self.profiler else nullcontext())

        try:
            with profile:
                output, row_count, column_count = convert()
                if self.profiler:
                    self.profiler.record_output(len(output.encode("utf-8")))
        except ProcessingError as e:
            response = self.error_handler.handle_processing_error(e)
            self.logger.info(f"{operation_name} failed: {response.suggested_action}")
            return ConversionResult(success=False, output="", errors=[str(e)])
        except Exception as e:
            self.logger.error(f"Unexpected error in {operation_name}: {e}")
            return ConversionResult(success=False, output="", errors=[f"Unexpected error: {e}"])

        self.logger.info(f"{operation_name}: {row_count} rows, {column_count} columns")
        return ConversionResult(
            success=True,
            output=output,
            row_count=row_count,
            column_count=column_count
        )
