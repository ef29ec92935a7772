"""Django ORM implementation of the ShipmentStatus repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.shipments.models import ShipmentStatus
from modules.shipments.repositories.interfaces import IShipmentStatusRepository

logger = structlog.get_logger(__name__)


class ShipmentStatusDjangoRepository(IShipmentStatusRepository):
    def get_by_id(self, id: str) -> Optional[ShipmentStatus]:
        try:
            return ShipmentStatus.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_name(self, name: str) -> Optional[ShipmentStatus]:
        return ShipmentStatus.objects.filter(name=name.strip().upper()).first()

    def existing_names(self) -> set[str]:
        return set(ShipmentStatus.objects.values_list("name", flat=True))

    def create(self, data: Dict[str, Any]) -> ShipmentStatus:
        status = ShipmentStatus.objects.create(**data)
        logger.info("shipment_status.saved", status_id=str(status.id), name=status.name)
        return status

    def save(self, entity: ShipmentStatus) -> ShipmentStatus:
        entity.save()
        logger.info("shipment_status.saved", status_id=str(entity.id), name=entity.name)
        return entity

    def delete(self, entity: ShipmentStatus) -> None:
        entity.delete()

    def is_referenced(self, entity: ShipmentStatus) -> bool:
        return entity.orders.exists()
