"""Unit tests for ShipmentStatusService."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.core.deletion import DeletionOutcome
from modules.shipments.dtos import (
    CheckTransitionDTO,
    CreateShipmentStatusDTO,
    UpdateShipmentStatusDTO,
)
from modules.shipments.exceptions import (
    ShipmentStatusAlreadyExists,
    ShipmentStatusNotFound,
)
from modules.shipments.models import ShipmentStatus
from modules.shipments.repositories import ShipmentStatusDjangoRepository
from modules.shipments.services import ShipmentStatusService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return ShipmentStatusService(ShipmentStatusDjangoRepository())


class TestInitializeDefaults:
    def test_is_idempotent(self, service):
        ShipmentStatus.objects.all().delete()

        first = service.initialize_defaults()
        second = service.initialize_defaults()

        assert [s.name for s in first] == [
            "PENDING",
            "PREPARATION",
            "IN_TRANSIT",
            "DELIVERED",
            "NOT_DELIVERED",
            "CANCELLED",
        ]
        assert second == []
        assert ShipmentStatus.objects.count() == 6

    def test_only_missing_rows_are_created(self, service):
        ShipmentStatus.objects.filter(name="CANCELLED").delete()

        created = service.initialize_defaults()

        assert [s.name for s in created] == ["CANCELLED"]
        assert created[0].color == "#FF0000"


class TestStatusCrud:
    def test_create_duplicate_name(self, service, statuses):
        with pytest.raises(ShipmentStatusAlreadyExists):
            service.create_status(CreateShipmentStatusDTO(name="pending"))

    def test_create_recreates_removed_status(self, service):
        ShipmentStatus.objects.filter(name="DELIVERED").delete()

        status = service.create_status(
            CreateShipmentStatusDTO(name=" delivered ", color="#00ff00", display_order=4)
        )

        assert status.name == "DELIVERED"
        assert status.color == "#00FF00"

    def test_name_outside_vocabulary_is_invalid(self):
        with pytest.raises(ValidationError):
            CreateShipmentStatusDTO(name="LOST")

    def test_name_cannot_be_updated(self):
        with pytest.raises(ValidationError):
            UpdateShipmentStatusDTO(name="OTHER")

    @pytest.mark.parametrize("field", ["description", "color", "display_order", "is_active"])
    def test_null_presentation_field_is_invalid(self, field):
        with pytest.raises(ValidationError):
            UpdateShipmentStatusDTO(**{field: None})

    def test_update_presentation_fields(self, service, statuses):
        status = service.update_status(
            str(statuses["PENDING"].id),
            UpdateShipmentStatusDTO(description="Waiting", color="#123abc"),
        )

        assert status.description == "Waiting"
        assert status.color == "#123ABC"

    def test_delete_referenced_status_deactivates(self, service, statuses, make_order):
        make_order()

        result = service.delete_status(str(statuses["PENDING"].id))

        assert result.outcome == DeletionOutcome.DEACTIVATED
        statuses["PENDING"].refresh_from_db()
        assert statuses["PENDING"].is_active is False

    def test_delete_unreferenced_status(self, service, statuses):
        result = service.delete_status(str(statuses["NOT_DELIVERED"].id))

        assert result.outcome == DeletionOutcome.DELETED
        assert not ShipmentStatus.objects.filter(name="NOT_DELIVERED").exists()

    def test_get_missing_status(self, service):
        with pytest.raises(ShipmentStatusNotFound):
            service.get_status("not-a-uuid")


class TestCheckTransition:
    def test_allowed(self, service, statuses):
        result = service.check_transition(CheckTransitionDTO(current="pending", requested="preparation"))

        assert result.is_allowed is True
        assert result.allowed == ["CANCELLED", "PREPARATION"]

    def test_not_allowed(self, service, statuses):
        result = service.check_transition(CheckTransitionDTO(current="DELIVERED", requested="PENDING"))

        assert result.is_allowed is False
        assert result.allowed == []

    def test_unknown_name(self, service, statuses):
        with pytest.raises(ShipmentStatusNotFound):
            service.check_transition(CheckTransitionDTO(current="PENDING", requested="LOST"))
