"""Validated configuration for building and drawing a grid."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geometry import Layout, Orientation, Point, orientation_by_name
from .grid import GridShape, HexGrid, generate_grid


class OrientationName(str, Enum):
    """Names of the orientation presets in :mod:`hexlattice.geometry.layout`."""

    POINTY = "pointy"
    FLAT = "flat"
    TRIANGLE_UP = "triangle-up"
    TRIANGLE_DOWN = "triangle-down"
    TRIANGLE_LEFT = "triangle-left"
    TRIANGLE_RIGHT = "triangle-right"


class GridConfig(BaseModel):
    """Everything needed to generate a grid and place it on a canvas."""

    model_config = ConfigDict(extra="forbid")

    shape: GridShape = Field(default=GridShape.HEXAGON)
    orientation: OrientationName = Field(default=OrientationName.POINTY)
    radius: int = Field(default=3, ge=0)
    size_x: float = Field(default=20.0, gt=0.0)
    size_y: float = Field(default=20.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    @field_validator("size_x", "size_y", "origin_x", "origin_y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @property
    def orientation_preset(self) -> Orientation:
        return orientation_by_name(self.orientation.value)

    def layout(self) -> Layout:
        """Return the :class:`Layout` described by this configuration."""

        return Layout(
            orientation=self.orientation_preset,
            size=Point(self.size_x, self.size_y),
            origin=Point(self.origin_x, self.origin_y),
        )

    def build_grid(self) -> HexGrid:
        return generate_grid(self.shape, self.radius, self.orientation_preset)


__all__ = ["GridConfig", "OrientationName"]
