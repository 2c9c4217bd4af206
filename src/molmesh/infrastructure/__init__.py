"""Infrastructure layer: file and network access."""

from .repositories.structure_repository import StructureRepository, fetch_rcsb, read_text_file

__all__ = ["StructureRepository", "fetch_rcsb", "read_text_file"]
