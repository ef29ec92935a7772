"""Django ORM implementation of the Route repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.routes.models import Route
from modules.routes.repositories.interfaces import IRouteRepository

logger = structlog.get_logger(__name__)


class RouteDjangoRepository(IRouteRepository):
    def get_by_id(self, id: str) -> Optional[Route]:
        try:
            return Route.objects.select_related("carrier").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_code(self, code: str) -> Optional[Route]:
        return Route.objects.filter(code=code.strip().upper()).first()

    def create(self, data: Dict[str, Any]) -> Route:
        route = Route.objects.create(**data)
        logger.info("route.saved", route_id=str(route.id), code=route.code)
        return route

    def save(self, entity: Route) -> Route:
        entity.save()
        logger.info("route.saved", route_id=str(entity.id), code=entity.code)
        return entity

    def delete(self, entity: Route) -> None:
        entity.delete()

    def is_referenced(self, entity: Route) -> bool:
        return entity.orders.exists()
