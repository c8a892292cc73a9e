"""Terminal user interface built on Textual."""

from .app import HexLatticeApp, describe_entry
from .grid_view import HexGridView, fit_layout

__all__ = ["HexGridView", "HexLatticeApp", "describe_entry", "fit_layout"]
