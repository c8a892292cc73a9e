"""Render sinks that consume grid entries and their corner polygons."""

from .sink import RenderSink, polygon_centroid, render_grid
from .svg import SvgSink
from .text import TextCanvasSink, distance_label

__all__ = [
    "RenderSink",
    "SvgSink",
    "TextCanvasSink",
    "distance_label",
    "polygon_centroid",
    "render_grid",
]
