"""Unit tests for CarrierService."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.carriers.dtos import CreateCarrierDTO, UpdateCarrierDTO
from modules.carriers.exceptions import CarrierAlreadyExists, CarrierNotFound
from modules.carriers.models import Carrier
from modules.carriers.repositories import CarrierDjangoRepository
from modules.carriers.services import CarrierService
from modules.core.deletion import DeletionOutcome
from modules.core.exceptions import DomainValidationError

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return CarrierService(repository=CarrierDjangoRepository())


class TestCarrierService:
    def test_create(self, service):
        carrier = service.create_carrier(
            CreateCarrierDTO(name="Rapido", document="abc-1234", phone="+551130000001")
        )

        assert carrier.document == "ABC-1234"
        assert carrier.email == ""
        assert carrier.max_concurrent_orders == 10

    def test_duplicate_document(self, service, make_carrier):
        make_carrier(document="ABC-1234")

        with pytest.raises(CarrierAlreadyExists):
            service.create_carrier(
                CreateCarrierDTO(name="Other", document="abc-1234", phone="+551130000002")
            )

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValidationError):
            CreateCarrierDTO(name="Zero", document="Z-1", phone="+551130000003", max_concurrent_orders=0)

    def test_update_capacity(self, service, make_carrier):
        carrier = make_carrier()

        updated = service.update_carrier(str(carrier.id), UpdateCarrierDTO(max_concurrent_orders=3))

        assert updated.max_concurrent_orders == 3

    def test_capacity_cannot_drop_below_active_orders(self, service, make_carrier, make_order):
        carrier = make_carrier(max_concurrent_orders=3)
        make_order(carrier=carrier)
        make_order(carrier=carrier)

        with pytest.raises(DomainValidationError) as exc_info:
            service.update_carrier(str(carrier.id), UpdateCarrierDTO(max_concurrent_orders=1))

        assert exc_info.value.context == {"active_orders": 2, "max_concurrent_orders": 1}
        carrier.refresh_from_db()
        assert carrier.max_concurrent_orders == 3

    def test_capacity_can_drop_to_active_orders(self, service, make_carrier, make_order):
        carrier = make_carrier(max_concurrent_orders=3)
        make_order(carrier=carrier)

        updated = service.update_carrier(str(carrier.id), UpdateCarrierDTO(max_concurrent_orders=1))

        assert updated.max_concurrent_orders == 1

    def test_active_orders_counts_non_terminal_orders(
        self, service, order_service, make_carrier, make_order
    ):
        carrier = make_carrier()
        make_order(carrier=carrier)
        delivered = make_order(carrier=carrier)
        for step in ("PREPARATION", "IN_TRANSIT", "DELIVERED"):
            order_service.change_status(delivered.id, step)

        assert service.active_orders(carrier) == 1

    def test_carrier_serving_a_route_is_deactivated(self, service, make_route, make_carrier):
        carrier = make_carrier()
        make_route(carrier=carrier)

        result = service.delete_carrier(str(carrier.id))

        assert result.outcome == DeletionOutcome.DEACTIVATED

    def test_unreferenced_carrier_is_deleted(self, service, make_carrier):
        carrier = make_carrier()

        result = service.delete_carrier(str(carrier.id))

        assert result.outcome == DeletionOutcome.DELETED
        assert not Carrier.objects.filter(id=carrier.id).exists()

    def test_get_missing_carrier(self, service):
        with pytest.raises(CarrierNotFound):
            service.get_carrier("nope")
