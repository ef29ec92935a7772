"""Carrier service layer (Use Cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.carriers.exceptions import CarrierAlreadyExists, CarrierNotFound
from modules.core.deletion import DeletionResultDTO, delete_or_deactivate
from modules.core.exceptions import DomainValidationError
from modules.core.transactions import atomic_operation

if TYPE_CHECKING:
    from modules.carriers.dtos import CreateCarrierDTO, UpdateCarrierDTO
    from modules.carriers.models import Carrier
    from modules.carriers.repositories.interfaces import ICarrierRepository

logger = structlog.get_logger(__name__)


class CarrierService:
    def __init__(self, repository: ICarrierRepository) -> None:
        self._repo = repository

    @atomic_operation
    def create_carrier(self, dto: CreateCarrierDTO) -> Carrier:
        """Register a carrier.

        Raises:
            CarrierAlreadyExists: the document is already registered.
        """
        self._ensure_document_free(dto.document)
        data = dto.model_dump()
        data["email"] = data["email"] or ""
        carrier = self._repo.create(data)
        logger.info("carrier.created", carrier_id=str(carrier.id))
        return carrier

    @atomic_operation
    def update_carrier(self, id: str, dto: UpdateCarrierDTO) -> Carrier:
        """Apply a partial update.

        The row is locked so a capacity change and an order assignment
        cannot interleave.

        Raises:
            CarrierNotFound: the carrier does not exist.
            CarrierAlreadyExists: the new document is already registered.
            DomainValidationError: the new ``max_concurrent_orders`` is below
                the carrier's current active orders.
        """
        carrier = self._repo.get_for_update(id)
        if not carrier:
            raise CarrierNotFound(id)
        changes = dto.model_dump(exclude_unset=True)
        if "max_concurrent_orders" in changes:
            self._ensure_capacity_covers_load(carrier, changes["max_concurrent_orders"])
        if "document" in changes and changes["document"] != carrier.document:
            self._ensure_document_free(changes["document"])
        if "email" in changes:
            changes["email"] = changes["email"] or ""
        for field, value in changes.items():
            setattr(carrier, field, value)
        carrier = self._repo.save(carrier)
        logger.info("carrier.updated", carrier_id=str(id), fields=sorted(changes))
        return carrier

    @atomic_operation
    def delete_carrier(self, id: str) -> DeletionResultDTO:
        return delete_or_deactivate(self.get_carrier(id), self._repo)

    def get_carrier(self, id: str) -> Carrier:
        carrier = self._repo.get_by_id(id)
        if not carrier:
            raise CarrierNotFound(id)
        return carrier

    def active_orders(self, carrier: Carrier) -> int:
        """Current load: orders in PENDING, PREPARATION or IN_TRANSIT."""
        return self._repo.active_order_count(carrier)

    def _ensure_capacity_covers_load(self, carrier: Carrier, maximum: int) -> None:
        active = self._repo.active_order_count(carrier)
        if maximum < active:
            logger.warning(
                "carrier.capacity_below_load",
                carrier_id=str(carrier.id),
                active_orders=active,
                max_concurrent_orders=maximum,
            )
            raise DomainValidationError(
                "max_concurrent_orders cannot be lower than the current active orders.",
                active_orders=active,
                max_concurrent_orders=maximum,
            )

    def _ensure_document_free(self, document: str) -> None:
        if self._repo.get_by_document(document):
            logger.warning("carrier.duplicate_document", document=document)
            raise CarrierAlreadyExists(
                f"Carrier document '{document}' already registered.",
                document=document,
            )
