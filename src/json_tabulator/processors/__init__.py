"""Table processors."""

from .table_projector import TableProjector
from .transposer import Transposer, transpose

__all__ = ["TableProjector", "Transposer", "transpose"]
