"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Client``, ``Carrier``).  Lookups by malformed identifiers
    return ``None`` rather than raising.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Insert a new entity built from ``data``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist changes made to an existing entity."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an entity physically."""


class IMasterDataRepository(IRepository[T]):
    """Repository for entities that orders reference (delete-or-deactivate)."""

    @abstractmethod
    def is_referenced(self, entity: T) -> bool:
        """Return ``True`` when at least one order points at ``entity``."""
