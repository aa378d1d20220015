"""Core type definitions for the JSON Tabulator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class CellKind(Enum):
    """Enumeration of typed cell value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def classify(cls, value: Any) -> "CellKind":
        """Return the kind of a typed cell value."""
        if value is None:
            return cls.NULL
        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, list):
            return cls.ARRAY
        return cls.STRING


class SyncState(Enum):
    """States of the document/table synchronization workspace."""
    IDLE = "idle"
    APPLYING_FROM_DOCUMENT = "applying-from-document"
    APPLYING_FROM_TABLE = "applying-from-table"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    STATE = "state"


@dataclass
class ConversionResult:
    """Result of a facade conversion."""
    success: bool
    output: str
    row_count: int = 0
    column_count: int = 0
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class StructuredParseError(ProcessingError):
    """Raised when document text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None,
                 colno: Optional[int] = None):
        super().__init__(message, ErrorType.SYNTAX,
                         context={"lineno": lineno, "colno": colno})
        self.lineno = lineno
        self.colno = colno


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for the JSON/table converter facade."""

    @abstractmethod
    def json_to_tsv(self, json_string: str) -> ConversionResult:
        """Convert a JSON document to TSV text."""
        pass

    @abstractmethod
    def tsv_to_json(self, tsv_text: str) -> ConversionResult:
        """Convert TSV text to a JSON document."""
        pass

    @abstractmethod
    def transpose_tsv(self, tsv_text: str) -> ConversionResult:
        """Swap the row and column axes of TSV text."""
        pass


class TableProcessorInterface(ABC):
    """Abstract interface for processors that produce a new table."""

    @abstractmethod
    def process(self, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> "Table":
        """Process table data into a new table."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
