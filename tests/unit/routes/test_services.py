"""Unit tests for RouteService."""

from __future__ import annotations

from datetime import datetime

import pytest
from django.utils import timezone
from pydantic import ValidationError

from modules.carriers.repositories import CarrierDjangoRepository
from modules.core.exceptions import DomainValidationError, InactiveReference
from modules.routes.dtos import CreateRouteDTO, UpdateRouteDTO
from modules.routes.exceptions import RouteAlreadyExists, RouteNotFound
from modules.routes.repositories import RouteDjangoRepository
from modules.routes.services import RouteService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return RouteService(
        repository=RouteDjangoRepository(),
        carrier_repository=CarrierDjangoRepository(),
    )


def _at(hour):
    return timezone.make_aware(datetime(2030, 1, 15, hour, 30))


class TestRouteService:
    def test_create(self, service, make_carrier):
        carrier = make_carrier()

        route = service.create_route(
            CreateRouteDTO(code="sp-camp", origin="Sao Paulo", destination="Campinas", carrier_id=carrier.id)
        )

        assert route.code == "SP-CAMP"
        assert (route.start_hour, route.end_hour) == (8, 18)
        assert route.carrier_id == carrier.id

    def test_duplicate_code(self, service, make_route, make_carrier):
        make_route(code="SP-CAMP")

        with pytest.raises(RouteAlreadyExists):
            service.create_route(
                CreateRouteDTO(code="sp-camp", origin="A", destination="B", carrier_id=make_carrier().id)
            )

    def test_inactive_carrier(self, service, make_carrier):
        carrier = make_carrier()
        carrier.deactivate()

        with pytest.raises(InactiveReference):
            service.create_route(
                CreateRouteDTO(code="R1", origin="A", destination="B", carrier_id=carrier.id)
            )

    def test_window_must_be_ordered(self, make_carrier):
        with pytest.raises(ValidationError):
            CreateRouteDTO(
                code="R1", origin="A", destination="B", carrier_id=make_carrier().id,
                start_hour=18, end_hour=8,
            )

    def test_update_checks_merged_window(self, service, make_route):
        route = make_route(start_hour=8, end_hour=18)

        with pytest.raises(DomainValidationError):
            service.update_route(str(route.id), UpdateRouteDTO(start_hour=19))

    def test_availability_inside_and_outside_window(self, service, make_route):
        route = make_route(start_hour=8, end_hour=18)

        inside = service.check_availability(str(route.id), at=_at(10))
        outside = service.check_availability(str(route.id), at=_at(20))

        assert inside.available is True
        assert outside.within_operating_hours is False
        assert outside.available is False

    def test_inactive_route_is_unavailable(self, service, make_route):
        route = make_route(start_hour=8, end_hour=18)
        route.deactivate()

        result = service.check_availability(str(route.id), at=_at(10))

        assert result.is_active is False
        assert result.available is False

    def test_get_missing_route(self, service):
        with pytest.raises(RouteNotFound):
            service.get_route("nope")
