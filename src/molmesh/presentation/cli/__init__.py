"""Command-line interface modules."""

from .build_geometry import main as build_geometry_main

__all__ = ["build_geometry_main"]
