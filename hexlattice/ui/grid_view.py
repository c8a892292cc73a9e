"""Textual widget that draws a generated grid and reports clicked hexes."""

from __future__ import annotations

import math

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from ..config import GridConfig
from ..corners import corner_array
from ..geometry import Layout, Point, hex_round, pixel_to_hex
from ..grid import GridEntry, GridKey, HexGrid, grid_key
from ..render import TextCanvasSink, render_grid

# Border plus horizontal padding of the surrounding Panel.
_CONTENT_OFFSET = (2, 1)


def fit_layout(base: Layout, grid: HexGrid, margin: float = 1.0) -> Layout:
    """Shift ``base`` so every corner of ``grid`` lands at non-negative pixels."""

    if not grid:
        return base
    corners = corner_array(base, grid)
    min_x = float(corners[:, :, 0].min())
    min_y = float(corners[:, :, 1].min())
    origin = Point(
        base.origin.x + math.ceil(-min_x + margin),
        base.origin.y + math.ceil(-min_y + margin),
    )
    return Layout(orientation=base.orientation, size=base.size, origin=origin)


class HexGridView(Widget):
    """Character-cell view of a grid; clicking a hex selects it."""

    DEFAULT_CSS = """
    HexGridView {
        height: 1fr;
        width: 1fr;
    }
    """

    class HexSelected(Message):
        """Posted when the user clicks a hex that belongs to the grid."""

        def __init__(self, entry: GridEntry) -> None:
            self.entry = entry
            super().__init__()

    def __init__(
        self,
        grid_config: GridConfig | None = None,
        *,
        cell_size: Point = Point(2.0, 1.0),
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.grid_config = grid_config or GridConfig()
        self.cell_size = cell_size
        self.selected_key: GridKey | None = None
        self.hex_grid: HexGrid = {}
        self.hex_layout: Layout = self._base_layout()
        self._rebuild_grid()

    # ------------------------------------------------------------------
    def _base_layout(self) -> Layout:
        return Layout(
            orientation=self.grid_config.orientation_preset,
            size=self.cell_size,
            origin=Point(0.0, 0.0),
        )

    def _rebuild_grid(self) -> None:
        self.hex_grid = self.grid_config.build_grid()
        self.hex_layout = fit_layout(self._base_layout(), self.hex_grid)

    def set_grid_config(self, grid_config: GridConfig) -> None:
        self.grid_config = grid_config
        self.selected_key = None
        self._rebuild_grid()
        self.refresh()

    # ------------------------------------------------------------------
    def hex_at(self, x: int, y: int) -> GridEntry | None:
        """Return the grid entry under widget cell ``(x, y)``, if any."""

        dx, dy = _CONTENT_OFFSET
        fractional = pixel_to_hex(self.hex_layout, Point(float(x - dx), float(y - dy)))
        return self.hex_grid.get(grid_key(hex_round(fractional)))

    def select_entry(self, entry: GridEntry) -> None:
        self.selected_key = entry.key
        self.refresh()
        self.post_message(self.HexSelected(entry))

    async def on_click(self, event: events.Click) -> None:  # pragma: no cover - UI glue
        entry = self.hex_at(event.x, event.y)
        if entry is not None:
            self.select_entry(entry)

    # ------------------------------------------------------------------
    def render(self) -> RenderableType:
        sink = TextCanvasSink(selected=self.selected_key)
        drawn = render_grid(self.hex_layout, self.hex_grid, sink)
        body = sink.to_text() if drawn else Text("(empty grid)")
        cfg = self.grid_config
        title = f"{cfg.shape.value} r={cfg.radius} {cfg.orientation.value}"
        return Panel(body, title=title, border_style="cyan")


__all__ = ["HexGridView", "fit_layout"]
