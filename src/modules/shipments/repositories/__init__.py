"""Shipment status repositories package."""

from modules.shipments.repositories.django_repository import (
    ShipmentStatusDjangoRepository,
)
from modules.shipments.repositories.interfaces import IShipmentStatusRepository

__all__ = ["IShipmentStatusRepository", "ShipmentStatusDjangoRepository"]
