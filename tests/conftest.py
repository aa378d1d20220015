"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_documents():
    """Sample list of nested records for testing."""
    return [
        {"id": 1, "name": "Alice", "role": "Admin", "details": {"active": True, "since": "2023"}},
        {"id": 2, "name": "Bob", "role": "User", "details": {"active": False}},
        {"id": 3, "name": "Charlie", "role": "User", "details": {"active": True, "since": "2024"}},
    ]


@pytest.fixture
def deep_document():
    """Sample single document with several nesting levels and leaf kinds."""
    return {
        "order": {
            "id": "A-17",
            "customer": {
                "name": "Dana",
                "address": {"city": "Lisbon", "zip": "1000-001"}
            },
            "lines": [{"sku": "X1", "qty": 2}, {"sku": "Y9", "qty": 1}],
            "notes": None,
            "paid": False,
            "total": 19.5
        }
    }


@pytest.fixture
def sample_tsv():
    """Sample TSV text as pasted from a spreadsheet."""
    return "id\tname\tdetails.active\n1\tAlice\tTRUE\n2\tBob\tfalse"
