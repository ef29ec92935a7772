"""Shipment status service layer (Use Cases).

Maintains the stored status rows and answers transition questions against
the fixed table in ``constants``.  Status *names* are immutable: the
lifecycle engine relies on them, so only presentation fields can change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.core.deletion import DeletionResultDTO, delete_or_deactivate
from modules.core.transactions import atomic_operation
from modules.shipments.constants import DEFAULT_STATUSES, allowed_transitions, is_allowed
from modules.shipments.dtos import TransitionCheckDTO
from modules.shipments.exceptions import (
    ShipmentStatusAlreadyExists,
    ShipmentStatusNotFound,
)

if TYPE_CHECKING:
    from modules.shipments.dtos import (
        CheckTransitionDTO,
        CreateShipmentStatusDTO,
        UpdateShipmentStatusDTO,
    )
    from modules.shipments.models import ShipmentStatus
    from modules.shipments.repositories.interfaces import IShipmentStatusRepository

logger = structlog.get_logger(__name__)


class ShipmentStatusService:
    def __init__(self, repository: IShipmentStatusRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @atomic_operation
    def create_status(self, dto: CreateShipmentStatusDTO) -> ShipmentStatus:
        """Store a status of the fixed vocabulary.

        Raises:
            ShipmentStatusAlreadyExists: the name is already stored.
        """
        if self._repo.get_by_name(dto.name):
            logger.warning("shipment_status.duplicate_name", name=dto.name)
            raise ShipmentStatusAlreadyExists(
                f"Shipment status '{dto.name}' already exists.", name=dto.name
            )
        status = self._repo.create(dto.model_dump())
        logger.info("shipment_status.created", status_id=str(status.id), name=status.name)
        return status

    @atomic_operation
    def update_status(self, id: str, dto: UpdateShipmentStatusDTO) -> ShipmentStatus:
        status = self.get_status(id)
        for field, value in dto.model_dump(exclude_unset=True).items():
            setattr(status, field, value)
        status = self._repo.save(status)
        logger.info("shipment_status.updated", status_id=str(status.id))
        return status

    @atomic_operation
    def delete_status(self, id: str) -> DeletionResultDTO:
        return delete_or_deactivate(self.get_status(id), self._repo)

    @atomic_operation
    def initialize_defaults(self) -> List[ShipmentStatus]:
        """Store every default status that is missing; return the new rows.

        Running it twice creates nothing the second time.
        """
        existing = self._repo.existing_names()
        created = [
            self._repo.create(
                {
                    "name": name,
                    "description": description,
                    "color": color,
                    "display_order": order,
                }
            )
            for name, description, color, order in DEFAULT_STATUSES
            if name not in existing
        ]
        logger.info(
            "shipment_status.defaults_initialized",
            created=[s.name for s in created],
        )
        return created

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_status(self, id: str) -> ShipmentStatus:
        status = self._repo.get_by_id(id)
        if not status:
            raise ShipmentStatusNotFound(id)
        return status

    def get_by_name(self, name: str) -> ShipmentStatus:
        status = self._repo.get_by_name(name)
        if not status:
            raise ShipmentStatusNotFound(name.strip().upper())
        return status

    def check_transition(self, dto: CheckTransitionDTO) -> TransitionCheckDTO:
        """Report whether ``current -> requested`` is a legal transition.

        Both names must resolve to stored statuses.

        Raises:
            ShipmentStatusNotFound: either name is not stored.
        """
        current = self.get_by_name(dto.current)
        requested = self.get_by_name(dto.requested)
        return TransitionCheckDTO(
            is_allowed=is_allowed(current.name, requested.name),
            current=current.name,
            requested=requested.name,
            allowed=allowed_transitions(current.name),
        )
