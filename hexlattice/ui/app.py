"""Textual application for browsing generated grids."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from ..config import GridConfig, OrientationName
from ..config_store import load_config, save_config
from ..geometry import hex_to_pixel
from ..grid import GridEntry, GridShape, canonical_key
from .grid_view import HexGridView

MAX_RADIUS = 12


def describe_entry(entry: GridEntry, grid_config: GridConfig) -> str:
    """Summary text for the details panel."""

    h = entry.coordinates
    centre = hex_to_pixel(grid_config.layout(), h)
    return (
        f"hex {canonical_key(h)}\n"
        f"q={h.q} r={h.r} s={h.s}\n"
        f"distance from origin: {entry.distance}\n"
        f"pixel centre: ({centre.x:.1f}, {centre.y:.1f})"
    )


class HexLatticeApp(App[None]):
    """Grid browser: pick shape, orientation and radius, click hexes."""

    TITLE = "hexlattice"

    CSS = """
    Screen { layout: vertical; }
    #details { height: 6; padding: 0 1; border: round #2d3b4d; }
    """

    BINDINGS = [
        Binding("plus,equals_sign", "grow", "Radius +"),
        Binding("minus", "shrink", "Radius -"),
        Binding("o", "cycle_orientation", "Orientation"),
        Binding("t", "toggle_shape", "Shape"),
        Binding("ctrl+s", "save_config", "Save"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, grid_config: GridConfig | None = None) -> None:
        super().__init__()
        self.grid_config = grid_config if grid_config is not None else load_config()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield HexGridView(self.grid_config, id="grid")
        yield Static("Click a hex to inspect it.", id="details")
        yield Footer()

    # ------------------------------------------------------------------
    def on_hex_grid_view_hex_selected(self, message: HexGridView.HexSelected) -> None:
        self.query_one("#details", Static).update(describe_entry(message.entry, self.grid_config))

    def _apply(self, **changes: object) -> None:
        self.grid_config = self.grid_config.model_copy(update=changes)
        self.query_one(HexGridView).set_grid_config(self.grid_config)
        self.query_one("#details", Static).update("Click a hex to inspect it.")

    def action_grow(self) -> None:
        self._apply(radius=min(MAX_RADIUS, self.grid_config.radius + 1))

    def action_shrink(self) -> None:
        self._apply(radius=max(0, self.grid_config.radius - 1))

    def action_cycle_orientation(self) -> None:
        names = list(OrientationName)
        index = names.index(self.grid_config.orientation)
        self._apply(orientation=names[(index + 1) % len(names)])

    def action_toggle_shape(self) -> None:
        shape = (
            GridShape.TRIANGLE
            if self.grid_config.shape is GridShape.HEXAGON
            else GridShape.HEXAGON
        )
        self._apply(shape=shape)

    def action_save_config(self) -> None:
        try:
            path = save_config(self.grid_config)
        except OSError as exc:
            self.notify(f"Could not save configuration: {exc}", severity="error")
            return
        self.notify(f"Saved configuration to {path}")


__all__ = ["HexLatticeApp", "describe_entry"]
