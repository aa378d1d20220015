"""Tests for table transposition."""

import pytest
from json_tabulator.processors.transposer import Transposer, transpose
from json_tabulator.io.tsv_codec import to_tsv


class TestTransposer:
    """Tests for Transposer.transpose."""

    def setup_method(self):
        """Set up test fixtures."""
        self.transposer = Transposer()

    def test_empty_headers(self):
        table = self.transposer.transpose([], [{"a": 1}])

        assert table.headers == []
        assert table.rows == []

    def test_basic_transpose(self):
        headers = ["name", "age", "city"]
        rows = [
            {"name": "Alice", "age": 30, "city": "Oslo"},
            {"name": "Bob", "age": 25, "city": "Rome"},
        ]

        table = self.transposer.transpose(headers, rows)

        assert table.headers == ["name", "Alice", "Bob"]
        assert table.rows == [
            {"name": "age", "Alice": 30, "Bob": 25},
            {"name": "city", "Alice": "Oslo", "Bob": "Rome"},
        ]

    def test_pivot_only_table(self):
        table = self.transposer.transpose(["k"], [{"k": "a"}, {"k": "b"}])

        assert table.headers == ["k", "a", "b"]
        assert table.rows == []

    def test_no_rows(self):
        table = self.transposer.transpose(["k", "a", "b"], [])

        assert table.headers == ["k"]
        assert table.rows == [{"k": "a"}, {"k": "b"}]

    @pytest.mark.parametrize("pivot_value", [None, "", "   ", {"x": 1}, [1, 2]])
    def test_synthetic_labels(self, pivot_value):
        table = self.transposer.transpose(["k", "v"], [{"k": "a", "v": 1}, {"k": pivot_value, "v": 2}])

        assert table.headers == ["k", "a", "Column 2"]
        assert table.rows == [{"k": "v", "a": 1, "Column 2": 2}]

    def test_missing_pivot_cell_gets_synthetic_label(self):
        table = self.transposer.transpose(["k", "v"], [{"v": 1}])

        assert table.headers == ["k", "Column 1"]

    def test_scalar_pivot_values_are_stringified(self):
        table = self.transposer.transpose(["k", "v"], [{"k": 7, "v": "a"}, {"k": True, "v": "b"}])

        assert table.headers == ["k", "7", "true"]

    def test_collision_with_synthetic_label(self):
        headers = ["k", "Column 1", "v"]
        rows = [
            {"k": None, "Column 1": "c1", "v": "v1"},
            {"k": "Column 1", "Column 1": "c2", "v": "v2"},
        ]

        table = self.transposer.transpose(headers, rows)

        assert table.headers == ["k", "Column 1", "Column 1 2"]
        assert table.rows == [
            {"k": "Column 1", "Column 1": "c1", "Column 1 2": "c2"},
            {"k": "v", "Column 1": "v1", "Column 1 2": "v2"},
        ]

    def test_repeated_collisions_take_next_free_suffix(self):
        rows = [{"k": "x", "v": 1}, {"k": "x", "v": 2}, {"k": "x", "v": 3}, {"k": "x 2", "v": 4}]

        table = self.transposer.transpose(["k", "v"], rows)

        assert table.headers == ["k", "x", "x 2", "x 3", "x 2 2"]

    def test_collision_with_pivot_name(self):
        table = self.transposer.transpose(["k", "v"], [{"k": "k", "v": 1}])

        assert table.headers == ["k", "k 2"]

    def test_absent_cells_stay_absent(self):
        table = self.transposer.transpose(["k", "a"], [{"k": "r1"}, {"k": "r2", "a": 5}])

        assert table.rows == [{"k": "a", "r2": 5}]

    def test_inputs_are_not_mutated(self):
        headers = ["k", "v"]
        rows = [{"k": "a", "v": 1}]

        self.transposer.transpose(headers, rows)

        assert headers == ["k", "v"]
        assert rows == [{"k": "a", "v": 1}]


class TestDoubleTranspose:
    """Transposing twice is only the identity when labels were not synthesized."""

    def test_double_transpose_reproduces_tsv(self):
        headers = ["name", "age", "city"]
        rows = [
            {"name": "Alice", "age": 30, "city": "Oslo"},
            {"name": "Bob", "age": 25, "city": "Rome"},
        ]

        once = transpose(headers, rows)
        twice = transpose(once.headers, once.rows)

        assert to_tsv(twice.headers, twice.rows) == to_tsv(headers, rows)

    def test_double_transpose_differs_after_label_synthesis(self):
        headers = ["name", "age"]
        rows = [{"name": "", "age": 30}, {"name": "Bob", "age": 25}]

        once = transpose(headers, rows)
        twice = transpose(once.headers, once.rows)

        assert to_tsv(twice.headers, twice.rows) != to_tsv(headers, rows)
        assert twice.rows[0]["name"] == "Column 1"

    def test_double_transpose_differs_with_duplicate_pivots(self):
        headers = ["name", "age"]
        rows = [{"name": "Bob", "age": 30}, {"name": "Bob", "age": 25}]

        once = transpose(headers, rows)
        twice = transpose(once.headers, once.rows)

        assert [row["name"] for row in twice.rows] == ["Bob", "Bob 2"]
