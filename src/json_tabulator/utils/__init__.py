"""Utility functions for the JSON Tabulator."""

from .numeric import is_numeric_string, parse_number, format_number
from .validation import ValidationUtils, reject_json_constant

__all__ = ["is_numeric_string", "parse_number", "format_number", "ValidationUtils", "reject_json_constant"]
