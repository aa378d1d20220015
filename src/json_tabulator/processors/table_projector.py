"""Projection between document collections and tables."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..engines.path_codec import PathCodec
from ..engines.type_inference import TypeInference
from ..models import Table


class TableProjector:
    """
    Builds tables from document collections and rebuilds documents from tables.

    Each document becomes one row. Nested objects are flattened into key-path
    columns, and the header list is the union of every row's key paths in the
    order they were first seen.
    """

    def __init__(self, path_codec: Optional[PathCodec] = None,
                 type_inference: Optional[TypeInference] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the table projector.

        Args:
            path_codec: Optional PathCodec instance
            type_inference: Optional TypeInference instance
            logger: Optional logger instance
        """
        self.path_codec = path_codec or PathCodec()
        self.type_inference = type_inference or TypeInference()
        self.logger = logger or logging.getLogger(__name__)

    def to_table(self, documents: Any) -> Table:
        """
        Project a document or document collection onto a table.

        Args:
            documents: A list of documents, a single dict, or anything else

        Returns:
            Table; scalars and None produce an empty table
        """
        if isinstance(documents, list):
            collection = documents
        elif isinstance(documents, dict):
            collection = [documents]
        else:
            self.logger.warning(
                f"Cannot tabulate a {type(documents).__name__} root; returning an empty table"
            )
            return Table()

        flat_rows = []
        for element in collection:
            if isinstance(element, dict):
                flat_rows.append(self.path_codec.flatten(element))
            else:
                flat_rows.append(self.path_codec.flatten({"value": element}))

        # dict keys keep first-seen order
        seen: Dict[str, None] = {}
        for row in flat_rows:
            for key in row:
                seen.setdefault(key, None)

        table = Table(headers=list(seen), rows=flat_rows)
        self.logger.info(f"Projected {table.row_count} rows onto {table.column_count} columns")
        return table

    def from_table(self, headers: Sequence[str],
                   rows: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Rebuild a document collection from table data.

        Every header is inferred for every row, so a missing cell becomes
        None rather than disappearing from the document.

        Args:
            headers: Ordered header key paths
            rows: Row mappings of raw cell text (or typed values)

        Returns:
            List of nested documents in row order
        """
        documents = []
        for row in rows:
            flat = {header: self.type_inference.infer_type(row.get(header)) for header in headers}
            documents.append(self.path_codec.unflatten(flat))

        self.logger.debug(f"Rebuilt {len(documents)} documents from {len(headers)} columns")
        return documents

    def cell_text_rows(self, table: Table) -> List[Dict[str, Optional[str]]]:
        """
        Render a table's rows as the raw text a grid would read back.

        Null cells read back as None and absent cells as the empty string.
        """
        rows = []
        for row in table.rows:
            rows.append({
                header: self.type_inference.format_cell(row.get(header), header in row).read()
                for header in table.headers
            })
        return rows
