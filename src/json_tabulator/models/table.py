"""Table model with validation and utility functions."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Table:
    """
    Tabular projection of a document collection.

    Headers are unique key paths in first-seen order. Each row maps a subset
    of the headers to typed cell values; a header missing from a row means
    that row had no value at that path.
    """

    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        """Validate table after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate table integrity."""
        if not isinstance(self.headers, list):
            raise ValueError("headers must be a list")

        if not isinstance(self.rows, list):
            raise ValueError("rows must be a list")

        if len(set(self.headers)) != len(self.headers):
            raise ValueError("headers must be unique")

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def is_empty(self) -> bool:
        """Check if the table has no headers."""
        return not self.headers
