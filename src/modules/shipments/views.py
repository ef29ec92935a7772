"""Shipment status API views.

Domain errors raised by the service propagate to
``modules.core.exception_handler``; views only parse input and render output.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.permissions import HasRole, Role
from modules.shipments.dtos import (
    CheckTransitionDTO,
    CreateShipmentStatusDTO,
    UpdateShipmentStatusDTO,
)
from modules.shipments.repositories import ShipmentStatusDjangoRepository
from modules.shipments.serializers import ShipmentStatusSerializer
from modules.shipments.services import ShipmentStatusService


class ShipmentStatusViewSet(GenericViewSet):
    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.MANAGER,
        "partial_update": Role.MANAGER,
        "destroy": Role.MANAGER,
        "initialize": Role.MANAGER,
    }
    serializer_class = ShipmentStatusSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ShipmentStatusService(
            repository=ShipmentStatusDjangoRepository()
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/shipment-statuses/"""
        dto = CreateShipmentStatusDTO.model_validate(request.data)
        shipment_status = self._service.create_status(dto)
        return Response(
            ShipmentStatusSerializer(shipment_status).data,
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/shipment-statuses/{pk}/"""
        return Response(ShipmentStatusSerializer(self._service.get_status(pk)).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/shipment-statuses/{pk}/"""
        dto = UpdateShipmentStatusDTO.model_validate(request.data)
        shipment_status = self._service.update_status(pk, dto)
        return Response(ShipmentStatusSerializer(shipment_status).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/shipment-statuses/{pk}/"""
        result = self._service.delete_status(pk)
        return Response(result.model_dump(mode="json"))

    @action(detail=False, methods=["post"], url_path="check-transition")
    def check_transition(self, request: Request) -> Response:
        """POST /api/v1/shipment-statuses/check-transition/

        Body: ``{"current": "PENDING", "requested": "DELIVERED"}``.
        """
        dto = CheckTransitionDTO.model_validate(request.data)
        return Response(self._service.check_transition(dto).model_dump())

    @action(detail=False, methods=["post"], url_path="initialize")
    def initialize(self, request: Request) -> Response:
        """POST /api/v1/shipment-statuses/initialize/"""
        created = self._service.initialize_defaults()
        return Response(
            {"created": [s.name for s in created]},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )
