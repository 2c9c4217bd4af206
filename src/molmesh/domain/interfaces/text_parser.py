"""Interface for text format decoders."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class TextParser(ABC, Generic[T]):
    """Abstract base class for parsers turning file text into domain objects."""

    @abstractmethod
    def parse(self, text: str) -> T:
        """
        Decode a complete file.

        Args:
            text: Full file content

        Returns:
            Decoded result

        Raises:
            GeometryError: If the text cannot be decoded
        """
        pass
