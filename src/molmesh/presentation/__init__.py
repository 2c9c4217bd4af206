"""Command-line interfaces and other presentation layer components."""

from .cli.build_geometry import main as build_geometry_main

__all__ = ["build_geometry_main"]
