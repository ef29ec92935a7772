"""Shipment status repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IMasterDataRepository

if TYPE_CHECKING:
    from modules.shipments.models import ShipmentStatus


class IShipmentStatusRepository(IMasterDataRepository["ShipmentStatus"]):
    """Repository contract for ShipmentStatus rows."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[ShipmentStatus]:
        """Retrieve a status by its (upper-cased) name."""

    @abstractmethod
    def existing_names(self) -> set[str]:
        """Names already stored."""
