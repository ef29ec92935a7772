"""Route service layer (Use Cases).

Rules enforced here:
- Route code must be unique.
- The serving carrier must exist and be active.
- The operating window stays ordered after a partial update.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

import structlog
from django.utils import timezone

from modules.carriers.exceptions import CarrierNotFound
from modules.core.deletion import DeletionResultDTO, delete_or_deactivate
from modules.core.exceptions import DomainValidationError, InactiveReference
from modules.core.transactions import atomic_operation
from modules.routes.dtos import RouteAvailabilityDTO
from modules.routes.exceptions import RouteAlreadyExists, RouteNotFound

if TYPE_CHECKING:
    from modules.carriers.models import Carrier
    from modules.carriers.repositories.interfaces import ICarrierRepository
    from modules.routes.dtos import CreateRouteDTO, UpdateRouteDTO
    from modules.routes.models import Route
    from modules.routes.repositories.interfaces import IRouteRepository

logger = structlog.get_logger(__name__)


class RouteService:
    def __init__(
        self,
        repository: IRouteRepository,
        carrier_repository: ICarrierRepository,
    ) -> None:
        self._repo = repository
        self._carrier_repo = carrier_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @atomic_operation
    def create_route(self, dto: CreateRouteDTO) -> Route:
        """Register a route served by an active carrier.

        Raises:
            RouteAlreadyExists: the code is already taken.
            CarrierNotFound / InactiveReference: the carrier cannot serve it.
        """
        if self._repo.get_by_code(dto.code):
            logger.warning("route.duplicate_code", code=dto.code)
            raise RouteAlreadyExists(f"Route code '{dto.code}' already registered.", code=dto.code)

        data = dto.model_dump(exclude={"carrier_id"})
        data["carrier"] = self._active_carrier(dto.carrier_id)
        route = self._repo.create(data)
        logger.info("route.created", route_id=str(route.id), carrier_id=str(dto.carrier_id))
        return route

    @atomic_operation
    def update_route(self, id: str, dto: UpdateRouteDTO) -> Route:
        route = self.get_route(id)
        changes = dto.model_dump(exclude_unset=True)

        start = changes.get("start_hour", route.start_hour)
        end = changes.get("end_hour", route.end_hour)
        if start >= end:
            raise DomainValidationError(
                "start_hour must be earlier than end_hour.",
                start_hour=start,
                end_hour=end,
            )

        if "carrier_id" in changes:
            route.carrier = self._active_carrier(changes.pop("carrier_id"))
        for field, value in changes.items():
            setattr(route, field, value)

        route = self._repo.save(route)
        logger.info("route.updated", route_id=str(id))
        return route

    @atomic_operation
    def delete_route(self, id: str) -> DeletionResultDTO:
        return delete_or_deactivate(self.get_route(id), self._repo)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_route(self, id: str) -> Route:
        route = self._repo.get_by_id(id)
        if not route:
            raise RouteNotFound(id)
        return route

    def check_availability(
        self, id: str, at: Optional[datetime] = None
    ) -> RouteAvailabilityDTO:
        """Is the route active and inside its operating window at ``at``?"""
        route = self.get_route(id)
        checked_at = at or timezone.now()
        within_hours = route.is_operating(checked_at)
        return RouteAvailabilityDTO(
            route_id=route.id,
            is_active=route.is_active,
            within_operating_hours=within_hours,
            available=route.is_active and within_hours,
            start_hour=route.start_hour,
            end_hour=route.end_hour,
            checked_at=checked_at,
        )

    def _active_carrier(self, carrier_id) -> Carrier:
        carrier = self._carrier_repo.get_by_id(str(carrier_id))
        if not carrier:
            raise CarrierNotFound(carrier_id)
        if not carrier.is_active:
            raise InactiveReference("carrier", carrier_id)
        return carrier
