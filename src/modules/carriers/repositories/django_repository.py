"""Django ORM implementation of the Carrier repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.carriers.models import Carrier
from modules.carriers.repositories.interfaces import ICarrierRepository
from modules.shipments.constants import ACTIVE_STATUSES

logger = structlog.get_logger(__name__)


class CarrierDjangoRepository(ICarrierRepository):
    def get_by_id(self, id: str) -> Optional[Carrier]:
        try:
            return Carrier.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_document(self, document: str) -> Optional[Carrier]:
        return Carrier.objects.filter(document=document.strip().upper()).first()

    def get_for_update(self, id: str) -> Optional[Carrier]:
        try:
            return Carrier.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def create(self, data: Dict[str, Any]) -> Carrier:
        carrier = Carrier.objects.create(**data)
        logger.info("carrier.saved", carrier_id=str(carrier.id))
        return carrier

    def save(self, entity: Carrier) -> Carrier:
        entity.save()
        logger.info("carrier.saved", carrier_id=str(entity.id))
        return entity

    def delete(self, entity: Carrier) -> None:
        entity.delete()

    def is_referenced(self, entity: Carrier) -> bool:
        """Orders and routes both point at carriers with ``PROTECT``."""
        return entity.orders.exists() or entity.routes.exists()

    def active_order_count(self, entity: Carrier) -> int:
        return entity.orders.filter(shipment_status__name__in=ACTIVE_STATUSES).count()
