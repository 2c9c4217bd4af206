"""Abstract interfaces shared across layers."""

from .repository import ReadOnlyRepository

__all__ = ["ReadOnlyRepository"]
