"""
Core interfaces and abstract base classes for the Roster platform.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Protocol, TypeVar

from .abstract_entity import AbstractEntity


T = TypeVar('T', bound=AbstractEntity)
T_co = TypeVar('T_co', bound=AbstractEntity, covariant=True)


class Repository(ABC, Generic[T]):
    """Abstract base class for record stores over one entity kind."""

    @abstractmethod
    def save(self, entity: T) -> "Repository[T]":
        """Insert or overwrite an entity; returns the repository for chaining."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find entity by ID, or None when absent."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """All entities in insertion order."""
        pass

    @abstractmethod
    def list_by(self, prop: str, value: Any) -> List[T]:
        """Entities whose named field equals value."""
        pass

    @abstractmethod
    def remove(self, entity_id: str) -> None:
        """Delete an entity by ID; no-op when absent."""
        pass


class SupportsFindById(Protocol[T_co]):
    """Capability of resolving a referenced entity; raises NotFoundError when absent."""

    def find_by_id(self, entity_id: str) -> T_co:
        ...


class SupportsListBy(Protocol[T_co]):
    """Capability of listing entities by a named field."""

    def list_by(self, prop: str, value: Any) -> List[T_co]:
        ...
