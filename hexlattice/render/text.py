"""Character-cell rendering of grids for terminal output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from rich.style import Style
from rich.text import Text

from ..geometry import Point
from ..grid import GridEntry, GridKey
from .sink import polygon_centroid

Label = Callable[[GridEntry], str]


def distance_label(entry: GridEntry) -> str:
    return str(entry.distance)


@dataclass
class _Cell:
    char: str
    style: Style | str | None


@dataclass
class TextCanvasSink:
    """Place one label per hex at its rounded pixel centre.

    Pixel units are character cells, so the layout handed to
    :func:`~hexlattice.render.sink.render_grid` should use a small size
    (around ``Point(2, 1)``) and an origin that keeps every centre at
    non-negative coordinates.
    """

    label: Label = distance_label
    styles: Sequence[str] = ("#dbe2ea", "#88c0ff")
    selected: GridKey | None = None
    selected_style: str = "reverse #ffe082"
    _placed: list[tuple[int, int, str, str]] = field(default_factory=list)

    def draw(self, entry: GridEntry, corners: Sequence[Point], index: int) -> None:
        centre = polygon_centroid(corners)
        text = self.label(entry)
        x = int(round(centre.x)) - len(text) // 2
        y = int(round(centre.y))
        if entry.key == self.selected:
            style = self.selected_style
        else:
            style = self.styles[entry.distance % len(self.styles)]
        self._placed.append((x, y, text, style))

    def lines(self) -> list[list[_Cell]]:
        if not self._placed:
            return []
        width = max(x + len(text) for x, _, text, _ in self._placed)
        height = max(y for _, y, _, _ in self._placed) + 1
        grid = [[_Cell(" ", None) for _ in range(max(width, 0))] for _ in range(max(height, 0))]
        for x, y, text, style in self._placed:
            if y < 0:
                continue
            for offset, char in enumerate(text):
                if 0 <= x + offset < width:
                    grid[y][x + offset] = _Cell(char, style)
        return grid

    def to_text(self) -> Text:
        out = Text()
        for row_index, row in enumerate(self.lines()):
            if row_index:
                out.append("\n")
            for cell in row:
                out.append(cell.char, style=cell.style)
        return out

    def to_plain(self) -> str:
        return "\n".join(line.rstrip() for line in self.to_text().plain.split("\n"))


__all__ = ["Label", "TextCanvasSink", "distance_label"]
