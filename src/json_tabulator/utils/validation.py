"""Validation utilities for document text and table data."""

import json
from typing import Any, Dict, List, Sequence, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


def reject_json_constant(name: str) -> Any:
    """``parse_constant`` hook refusing NaN and Infinity, which are not JSON."""
    raise ValueError(f"Unsupported JSON constant: {name}")


class ValidationUtils:
    """Utility class for validating document text and table data."""

    MAX_COMFORTABLE_DEPTH = 20

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="document is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string, parse_constant=reject_json_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=e.msg,
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="document"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        warnings.extend(ValidationUtils._structure_warnings(data))

        return ValidationResult(
            is_valid=True,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_table(headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> ValidationResult:
        """
        Validate table data before conversion.

        Duplicate headers and headers that are not text are errors. The
        empty header is allowed since ``""`` is a valid document key. Row
        keys that are not headers are reported as warnings since they are
        ignored on conversion.
        """
        errors = []
        warnings = []

        seen = set()
        for position, header in enumerate(headers):
            if not isinstance(header, str):
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Header must be text, got {type(header).__name__}",
                    location=f"column {position + 1}"
                ))
            elif header in seen:
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Duplicate header '{header}'",
                    location=f"column {position + 1}"
                ))
            else:
                seen.add(header)

        for index, row in enumerate(rows):
            unknown = [key for key in row if key not in seen]
            if unknown:
                warnings.append(f"Row {index + 1} has values outside the headers: {', '.join(unknown)}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _structure_warnings(data: Any) -> List[str]:
        """Collect warnings about parsed document structure."""
        warnings = []

        if not isinstance(data, (dict, list)):
            warnings.append(f"Root element is a {type(data).__name__}; the table will be empty")
            return warnings

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > ValidationUtils.MAX_COMFORTABLE_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). Column names will be long.")

        return warnings

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        max_child_depth = current_depth
        children = data.values() if isinstance(data, dict) else data

        for child in children:
            max_child_depth = max(max_child_depth,
                                  ValidationUtils._calculate_max_depth(child, current_depth + 1))

        return max_child_depth

    @staticmethod
    def split_messages(result: ValidationResult) -> Tuple[List[str], List[str]]:
        """Return (error messages, warnings) of a validation result."""
        return [error.message for error in result.errors], list(result.warnings)
