"""Error handling implementation for the JSON Tabulator."""

import logging
from typing import Any, Dict, Optional, Sequence
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for JSON Tabulator operations.

    Validates document text and table data, and turns processing errors
    into recovery suggestions. Errors never change the caller's current
    representation; the suggestions say what the user should fix.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        if not isinstance(input_data, str):
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"expected text, got {type(input_data).__name__}",
                    location="input"
                )],
                warnings=[]
            )

        result = ValidationUtils.validate_json_string(input_data)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def validate_table(self, headers: Sequence[str],
                       rows: Sequence[Dict[str, Any]]) -> ValidationResult:
        """
        Validate table data before it is converted back to documents.

        Args:
            headers: Ordered headers
            rows: Row mappings

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_table(headers, rows)
        for warning in result.warnings:
            self.logger.warning(warning)
        return result

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide recovery suggestions.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return self._handle_syntax_error(error)
        elif error.error_type == ErrorType.STRUCTURE:
            return self._handle_structure_error(error)
        elif error.error_type == ErrorType.STATE:
            return self._handle_state_error(error)
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                partial_results=None
            )

    def _handle_syntax_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle malformed document text."""
        location = ""
        if error.context and error.context.get("lineno"):
            location = f" near line {error.context['lineno']}, column {error.context.get('colno')}"
        return ErrorResponse(
            can_recover=False,
            suggested_action=f"Fix the JSON syntax{location}. "
                             "The previous table is kept until the document parses.",
            partial_results=None
        )

    def _handle_structure_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle invalid table structure such as duplicate headers."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Rename duplicate headers and convert again.",
            partial_results=error.context.get("headers") if error.context else None
        )

    def _handle_state_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle updates attempted while another update is being applied."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Retry the update once the current one has been applied.",
            partial_results=None
        )
