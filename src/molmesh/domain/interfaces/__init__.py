"""Domain interfaces."""

from .text_parser import TextParser

__all__ = ["TextParser"]
