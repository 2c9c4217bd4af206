"""Abstract base class for read-only sources of parsed entities."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ReadOnlyRepository(ABC, Generic[T]):
    """
    Repository over files that are parsed on every access.

    Subclasses supply ``get`` and ``ids``; ``list`` loads every ID in order.
    Writes are refused since the backing files are inputs, not storage.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Parse the entity stored under ``id``, or None if there is none."""

    @abstractmethod
    def ids(self) -> List[str]:
        """IDs available in this repository, sorted."""

    def list(self) -> List[T]:
        """Load every entity, skipping IDs that vanished since ``ids``."""
        return [entity for entity in (self.get(id) for id in self.ids()) if entity is not None]

    def create(self, entity: T) -> T:
        raise NotImplementedError(f"{type(self).__name__} is read-only")

    def update(self, entity: T) -> T:
        raise NotImplementedError(f"{type(self).__name__} is read-only")

    def delete(self, id: str) -> None:
        raise NotImplementedError(f"{type(self).__name__} is read-only")
