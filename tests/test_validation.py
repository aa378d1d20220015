"""Tests for validation utilities."""

from json_tabulator.utils.validation import ValidationUtils
from json_tabulator.types import ErrorType


class TestValidateJsonString:
    """Tests for ValidationUtils.validate_json_string."""

    def test_valid_list(self):
        result = ValidationUtils.validate_json_string('[{"a": 1}]')

        assert result.is_valid
        assert result.warnings == []

    def test_empty_string(self):
        result = ValidationUtils.validate_json_string("  \n ")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].location == "input"

    def test_syntax_error_location(self):
        result = ValidationUtils.validate_json_string('{"a": }')

        assert not result.is_valid
        assert result.errors[0].location == "line 1, column 7"

    def test_non_json_constant(self):
        result = ValidationUtils.validate_json_string('{"a": NaN}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].message == "Unsupported JSON constant: NaN"
        assert result.errors[0].location == "document"

    def test_scalar_root_is_valid_with_warning(self):
        result = ValidationUtils.validate_json_string("null")

        assert result.is_valid
        assert "NoneType" in result.warnings[0]

    def test_deep_nesting_warning(self):
        deep = "[" * 25 + "]" * 25

        result = ValidationUtils.validate_json_string(deep)

        assert result.is_valid
        assert any("Deep nesting" in warning for warning in result.warnings)


class TestValidateTable:
    """Tests for ValidationUtils.validate_table."""

    def test_valid_table(self):
        result = ValidationUtils.validate_table(["a", "b.c"], [{"a": "1"}])

        assert result.is_valid
        assert result.warnings == []

    def test_empty_header_is_a_valid_key(self):
        result = ValidationUtils.validate_table(["", "b"], [{"": "x", "b": 2}])

        assert result.is_valid
        assert result.warnings == []

    def test_non_text_header(self):
        result = ValidationUtils.validate_table(["a", 5], [])

        assert not result.is_valid
        assert result.errors[0].location == "column 2"
        assert result.errors[0].message == "Header must be text, got int"

    def test_unknown_row_keys_warn(self):
        result = ValidationUtils.validate_table(["a"], [{"a": 1, "z": 2}])

        assert result.is_valid
        assert result.warnings == ["Row 1 has values outside the headers: z"]

    def test_split_messages(self):
        result = ValidationUtils.validate_table(["a", "a"], [{"q": 1}])

        errors, warnings = ValidationUtils.split_messages(result)

        assert errors == ["Duplicate header 'a'"]
        assert len(warnings) == 1
