"""SVG document output for generated grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..geometry import Point
from ..grid import GridEntry, canonical_key

# Fill colours cycle with distance from the origin.
DEFAULT_FILLS: tuple[str, ...] = ("#1b2735", "#17212c", "#2a1a1a", "#25364a")


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass
class SvgSink:
    """Render sink that accumulates one ``<polygon>`` per hex."""

    fills: Sequence[str] = DEFAULT_FILLS
    stroke: str = "#88c0ff"
    stroke_width: float = 1.0
    padding: float = 4.0
    selected: str | None = None
    _elements: list[str] = field(default_factory=list)
    _xs: list[float] = field(default_factory=list)
    _ys: list[float] = field(default_factory=list)

    def draw(self, entry: GridEntry, corners: Sequence[Point], index: int) -> None:
        key = canonical_key(entry.coordinates)
        fill = self.fills[entry.distance % len(self.fills)]
        points = " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in corners)
        classes = "hexagon selected" if key == self.selected else "hexagon"
        self._elements.append(
            f'<polygon id="hex-{key}" class="{classes}" data-index="{index}" '
            f'data-distance="{entry.distance}" points="{points}" fill="{fill}" '
            f'stroke="{self.stroke}" stroke-width="{_fmt(self.stroke_width)}"/>'
        )
        self._xs.extend(p.x for p in corners)
        self._ys.extend(p.y for p in corners)

    @property
    def element_count(self) -> int:
        return len(self._elements)

    def document(self) -> str:
        """Return a standalone SVG document sized to the drawn polygons."""

        if self._xs:
            min_x = min(self._xs) - self.padding
            min_y = min(self._ys) - self.padding
            width = max(self._xs) - min(self._xs) + 2 * self.padding
            height = max(self._ys) - min(self._ys) + 2 * self.padding
        else:
            min_x = min_y = 0.0
            width = height = 2 * self.padding
        header = (
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="{_fmt(min_x)} {_fmt(min_y)} {_fmt(width)} {_fmt(height)}" '
            f'width="{_fmt(width)}" height="{_fmt(height)}">'
        )
        return "\n".join([header, *("  " + e for e in self._elements), "</svg>"]) + "\n"


__all__ = ["DEFAULT_FILLS", "SvgSink"]
