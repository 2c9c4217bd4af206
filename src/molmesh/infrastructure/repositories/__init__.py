"""Repository implementations."""

from .structure_repository import StructureRepository, fetch_rcsb, read_text_file

__all__ = ["StructureRepository", "fetch_rcsb", "read_text_file"]
