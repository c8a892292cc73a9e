"""Command line entry point: export a grid or launch the Textual browser."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import GridConfig, OrientationName
from .config_store import load_config
from .frames import grid_frame
from .grid import GridShape, HexGrid
from .render import SvgSink, render_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexlattice",
        description="Generate hexagonal or triangular hex grids.",
    )
    parser.add_argument("--shape", choices=[s.value for s in GridShape])
    parser.add_argument("--orientation", choices=[o.value for o in OrientationName])
    parser.add_argument("--radius", type=int)
    parser.add_argument("--size", type=float, help="hex size in pixels (x and y)")
    parser.add_argument("--svg", type=Path, metavar="PATH", help="write an SVG document")
    parser.add_argument("--table", action="store_true", help="print the grid entries")
    return parser


def config_from_args(args: argparse.Namespace, base: GridConfig) -> GridConfig:
    """Overlay command line options on ``base``; raises ``ValidationError``."""

    data = base.model_dump()
    if args.shape is not None:
        data["shape"] = args.shape
    if args.orientation is not None:
        data["orientation"] = args.orientation
    if args.radius is not None:
        data["radius"] = args.radius
    if args.size is not None:
        data["size_x"] = data["size_y"] = args.size
    return GridConfig.model_validate(data)


def grid_table(grid: HexGrid, grid_config: GridConfig) -> Table:
    frame = grid_frame(grid, grid_config.layout())
    table = Table(title=f"{grid_config.shape.value} grid, radius {grid_config.radius}")
    for column in ("key", "q", "r", "s", "distance", "x", "y"):
        table.add_column(column, justify="left" if column == "key" else "right")
    for row in frame.iter_rows(named=True):
        table.add_row(
            row["key"],
            str(row["q"]),
            str(row["r"]),
            str(row["s"]),
            str(row["distance"]),
            f"{row['x']:.2f}",
            f"{row['y']:.2f}",
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return an exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    try:
        grid_config = config_from_args(args, load_config())
    except ValidationError as exc:
        console.print(f"[red]invalid options:[/red] {escape(str(exc))}")
        return 2

    if args.svg is None and not args.table:
        from .ui import HexLatticeApp

        HexLatticeApp(grid_config).run()
        return 0

    grid = grid_config.build_grid()
    if not grid:
        console.print(
            f"[yellow]{grid_config.shape.value} grid with orientation "
            f"{grid_config.orientation.value!r} is empty[/yellow]"
        )

    if args.table:
        console.print(grid_table(grid, grid_config))

    if args.svg is not None:
        sink = SvgSink()
        count = render_grid(grid_config.layout(), grid, sink)
        args.svg.write_text(sink.document(), encoding="utf-8")
        console.print(f"wrote {count} hexagons to {args.svg}")
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
