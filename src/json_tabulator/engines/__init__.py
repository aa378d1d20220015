"""Core conversion engines."""

from .path_codec import PathCodec, flatten, unflatten, is_index_segment
from .type_inference import TypeInference, infer_type, format_cell, to_text

__all__ = [
    "PathCodec",
    "flatten",
    "unflatten",
    "is_index_segment",
    "TypeInference",
    "infer_type",
    "format_cell",
    "to_text",
]
