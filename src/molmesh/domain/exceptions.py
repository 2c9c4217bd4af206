"""Exceptions raised while turning structure and mesh text into geometry."""

from typing import Optional


class GeometryError(ValueError):
    """Base class for all ingestion failures."""


class MalformedRecordError(GeometryError):
    """A record could not be decoded (unreadable numeric field, missing tokens)."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        record: str = "",
        field: Optional[str] = None,
    ):
        self.line_number = line_number
        self.record = record
        self.field = field
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}")


class UnsupportedReferenceError(GeometryError):
    """A face refers to a vertex, texcoord or normal that does not exist."""

    def __init__(self, message: str, line_number: Optional[int] = None, token: str = ""):
        self.line_number = line_number
        self.token = token
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}")


class StructureFetchError(GeometryError):
    """Downloading a structure file failed."""
