"""Validation errors raised by the hex geometry core."""

from __future__ import annotations


class HexGeometryError(ValueError):
    """Base class for invalid hex geometry input."""


class InvalidCoordinate(HexGeometryError):
    """Cube coordinates do not sum to zero."""


class InvalidDirection(HexGeometryError):
    """Direction index outside the range 0..5."""


class InvalidCorner(HexGeometryError):
    """Corner index outside the range 0..5."""


__all__ = ["HexGeometryError", "InvalidCoordinate", "InvalidDirection", "InvalidCorner"]
