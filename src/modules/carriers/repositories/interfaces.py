"""Carrier repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IMasterDataRepository

if TYPE_CHECKING:
    from modules.carriers.models import Carrier


class ICarrierRepository(IMasterDataRepository["Carrier"]):
    """Repository contract for carriers."""

    @abstractmethod
    def get_by_document(self, document: str) -> Optional[Carrier]:
        """Retrieve a carrier by its (upper-cased) document."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Carrier]:
        """Retrieve a carrier with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def active_order_count(self, entity: Carrier) -> int:
        """Orders of this carrier that still count against its capacity."""
