"""Tests for key-path flattening and unflattening."""

import pytest
from json_tabulator.engines.path_codec import PathCodec, flatten, unflatten, is_index_segment


class TestFlatten:
    """Tests for PathCodec.flatten."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = PathCodec()

    def test_flatten_nested_object(self):
        assert self.codec.flatten({"a": {"b": 1, "c": 2}}) == {"a.b": 1, "a.c": 2}

    def test_flatten_keeps_empty_object_as_leaf(self):
        assert self.codec.flatten({"a": {}}) == {"a": {}}

    def test_flatten_keeps_lists_as_leaves(self):
        """Lists are never expanded, even when they hold objects."""
        flat = self.codec.flatten({"tags": ["x", "y"], "items": [{"id": 1}]})

        assert flat == {"tags": ["x", "y"], "items": [{"id": 1}]}

    def test_flatten_scalars_and_null(self):
        flat = self.codec.flatten({"s": "text", "n": 1.5, "b": False, "z": None})

        assert flat == {"s": "text", "n": 1.5, "b": False, "z": None}

    def test_flatten_deep_nesting(self, deep_document):
        flat = self.codec.flatten(deep_document)

        assert list(flat) == [
            "order.id",
            "order.customer.name",
            "order.customer.address.city",
            "order.customer.address.zip",
            "order.lines",
            "order.notes",
            "order.paid",
            "order.total",
        ]
        assert flat["order.customer.address.city"] == "Lisbon"

    def test_flatten_does_not_mutate_input(self):
        document = {"a": {"b": {"c": 1}}}
        self.codec.flatten(document)

        assert document == {"a": {"b": {"c": 1}}}

    def test_flatten_custom_separator(self):
        codec = PathCodec(separator="/")

        assert codec.flatten({"a": {"b": 1}}) == {"a/b": 1}

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError, match="separator cannot be empty"):
            PathCodec(separator="")


class TestUnflatten:
    """Tests for PathCodec.unflatten."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = PathCodec()

    def test_unflatten_nested_object(self):
        assert self.codec.unflatten({"a.b": 1, "a.c": 2}) == {"a": {"b": 1, "c": 2}}

    def test_unflatten_reverses_flatten(self, deep_document):
        assert self.codec.unflatten(self.codec.flatten(deep_document)) == deep_document

    def test_numeric_segment_creates_list(self):
        """A numeric segment under a parent is read as a list index."""
        result = self.codec.unflatten({"items.0": "a", "items.1": "b"})

        assert result == {"items": ["a", "b"]}

    def test_numeric_segment_pads_list_with_none(self):
        result = self.codec.unflatten({"items.2": "c"})

        assert result == {"items": [None, None, "c"]}

    def test_numeric_key_quirk_is_not_fixed(self):
        """An object key literally named "0" comes back as a list."""
        document = {"scores": {"0": "zero"}}

        assert self.codec.unflatten(self.codec.flatten(document)) == {"scores": ["zero"]}

    def test_nested_objects_inside_list(self):
        result = self.codec.unflatten({"rows.0.id": 1, "rows.1.id": 2})

        assert result == {"rows": [{"id": 1}, {"id": 2}]}

    def test_top_level_numeric_key_stays_object_key(self):
        assert self.codec.unflatten({"0": "x"}) == {"0": "x"}

    def test_leaf_then_branch_last_wins(self):
        """The deeper path processed last replaces the scalar."""
        result = self.codec.unflatten({"a": 5, "a.b": 6})

        assert result == {"a": {"b": 6}}

    def test_branch_then_leaf_last_wins(self):
        """The scalar processed last replaces the container."""
        result = self.codec.unflatten({"a.b": 6, "a": 5})

        assert result == {"a": 5}

    def test_list_addressed_by_name_becomes_object(self):
        result = self.codec.unflatten({"a.0": "first", "a.name": "n"})

        assert result == {"a": {"0": "first", "name": "n"}}

    def test_dict_addressed_by_index_stays_object(self):
        result = self.codec.unflatten({"a.name": "n", "a.0": "first"})

        assert result == {"a": {"name": "n", "0": "first"}}

    def test_container_leaf_is_copied(self):
        items = [1]
        flat = {"a": items, "a.1": 2}

        result = self.codec.unflatten(flat)

        assert result == {"a": [1, 2]}
        assert items == [1]
        assert flat["a"] is items

    def test_unflatten_empty_record(self):
        assert self.codec.unflatten({}) == {}


class TestModuleHelpers:
    """Tests for module-level helpers."""

    def test_flatten_and_unflatten_functions(self):
        assert flatten({"a": {"b": 1}}) == {"a.b": 1}
        assert unflatten({"a.b": 1}) == {"a": {"b": 1}}

    @pytest.mark.parametrize("segment,expected", [
        ("0", True),
        ("2", True),
        ("10", True),
        ("x", False),
        ("", False),
        ("-1", False),
        ("1.5", False),
        ("٣", False),
    ])
    def test_is_index_segment(self, segment, expected):
        assert is_index_segment(segment) is expected
