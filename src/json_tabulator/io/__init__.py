"""Text I/O formats for the JSON Tabulator."""

from .tsv_codec import TsvCodec, to_tsv, parse_tsv, is_tabular_text

__all__ = ["TsvCodec", "to_tsv", "parse_tsv", "is_tabular_text"]
