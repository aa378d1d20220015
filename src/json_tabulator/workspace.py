"""Editing session that keeps a JSON document and a table grid in sync."""

import json
import logging
from contextlib import contextmanager
from typing import Callable, List, Optional

from .converter import JSONTableConverter
from .io import is_tabular_text
from .models import Grid, render_grid
from .types import ProcessingError, SyncState

EXAMPLE_DOCUMENT = [
    {"id": 1, "name": "Alice", "role": "Admin", "details": {"active": True, "since": "2023"}},
    {"id": 2, "name": "Bob", "role": "User", "details": {"active": False}},
    {"id": 3, "name": "Charlie", "role": "User", "details": {"active": True, "since": "2024"}},
]

Listener = Callable[["Workspace"], None]


class Workspace:
    """
    Two synchronized views of the same data: document text and an editable grid.

    Every update runs in one of the non-idle SyncState values. Updates
    requested while another one is being applied, for instance by a listener
    reacting to a change notification, are ignored and reported as False.
    """

    def __init__(self, converter: Optional[JSONTableConverter] = None,
                 indent: int = 2,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize an empty workspace.

        Args:
            converter: Optional JSONTableConverter instance
            indent: Indentation of generated document text
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.converter = converter or JSONTableConverter(indent=indent, logger=self.logger)
        self.document_text = ""
        self.grid = Grid()
        self.error: Optional[str] = None
        self.state = SyncState.IDLE
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every applied change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Document side

    def load_document_text(self, text: str) -> bool:
        """
        Replace the document text and re-render the grid from it.

        Blank text clears the grid. Invalid JSON sets ``error`` and leaves the
        grid as it was.
        """
        if not self._accepts_update("document load"):
            return False
        with self._applying(SyncState.APPLYING_FROM_DOCUMENT):
            self._apply_document_text(text)
        return True

    def prettify(self) -> bool:
        """Re-indent the document text; False when it does not parse."""
        return self._reformat(self.converter.parser.prettify)

    def minify(self) -> bool:
        """Compact the document text; False when it does not parse."""
        return self._reformat(self.converter.parser.minify)

    def clear(self) -> bool:
        return self.load_document_text("")

    def load_example(self) -> bool:
        return self.load_document_text(json.dumps(EXAMPLE_DOCUMENT, indent=self.converter.indent))

    # Table side

    def edit_cell(self, row_index: int, header: str, text: str) -> bool:
        """Type text into one grid cell and rebuild the document from the grid."""
        if not self._accepts_update("cell edit"):
            return False
        self.grid.set_cell_text(row_index, header, text)
        return self.apply_table_edit()

    def apply_table_edit(self) -> bool:
        """Rebuild the document text from the grid's current cell text."""
        if not self._accepts_update("table edit"):
            return False
        with self._applying(SyncState.APPLYING_FROM_TABLE):
            headers, rows = self.grid.get_table_data()
            try:
                self.document_text = self.converter.table_to_json(headers, rows)
                self.error = None
            except ProcessingError as e:
                self.converter.error_handler.handle_processing_error(e)
                self.error = str(e)
        return True

    def paste(self, text: str) -> bool:
        """
        Import pasted spreadsheet data.

        Tabular text, or any text while the grid is empty, is parsed as TSV,
        unflattened row by row and loaded as the new document. Returns False
        when the paste was left to the cell being edited or held no rows.
        """
        if not self._accepts_update("paste"):
            return False
        if not self.grid.is_empty() and not is_tabular_text(text):
            return False

        documents = self.converter.tsv_to_documents(text)
        if not documents:
            self.logger.debug("Pasted text held no data rows")
            return False

        with self._applying(SyncState.APPLYING_FROM_TABLE):
            self._apply_document_text(self.converter.parser.dumps(documents))
        return True

    def copy_table(self) -> str:
        """Return the grid as TSV text, exactly as it should reach the clipboard."""
        headers, rows = self.grid.get_table_data()
        return self.converter.tsv_codec.to_tsv(headers, rows)

    def transpose(self) -> bool:
        """
        Transpose the grid and rebuild the document from the result.

        The grid and document text change together. When the transposed
        table cannot be converted, both stay as they were and ``error`` is set.
        """
        if not self._accepts_update("transpose"):
            return False
        if self.grid.is_empty():
            self.logger.info("Table is empty; nothing to transpose")
            return False

        with self._applying(SyncState.APPLYING_FROM_TABLE):
            headers, rows = self.grid.get_table_data()
            table = self.converter.transposer.transpose(headers, rows)
            try:
                document_text = self.converter.table_to_json(table.headers, table.rows)
            except ProcessingError as e:
                self.converter.error_handler.handle_processing_error(e)
                self.error = str(e)
            else:
                self.grid = render_grid(table.headers, table.rows)
                self.document_text = document_text
                self.error = None
        return self.error is None

    # Internals

    def _apply_document_text(self, text: str) -> None:
        self.document_text = text
        if not text.strip():
            self.grid = Grid()
            self.error = None
            return

        try:
            table = self.converter.json_to_table(text)
        except ProcessingError as e:
            self.converter.error_handler.handle_processing_error(e)
            self.error = str(e)
            return

        self.error = None
        self.grid = render_grid(table.headers, table.rows)

    def _reformat(self, reformat: Callable[[str], str]) -> bool:
        if not self._accepts_update("reformat") or not self.document_text.strip():
            return False
        with self._applying(SyncState.APPLYING_FROM_DOCUMENT):
            try:
                self.document_text = reformat(self.document_text)
                self.error = None
            except ProcessingError as e:
                self.error = str(e)
        return self.error is None

    def _accepts_update(self, operation: str) -> bool:
        if self.state is SyncState.IDLE:
            return True
        self.logger.debug(f"Ignoring {operation} while {self.state.value}")
        return False

    @contextmanager
    def _applying(self, state: SyncState):
        self.state = state
        try:
            yield
            # listeners run before returning to IDLE so their updates are ignored
            for listener in list(self._listeners):
                listener(self)
        finally:
            self.state = SyncState.IDLE
