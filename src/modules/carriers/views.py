"""Carrier API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.carriers.dtos import CreateCarrierDTO, UpdateCarrierDTO
from modules.carriers.repositories import CarrierDjangoRepository
from modules.carriers.serializers import CarrierSerializer
from modules.carriers.services import CarrierService
from modules.core.permissions import HasRole, Role


class CarrierViewSet(GenericViewSet):
    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.MANAGER,
        "partial_update": Role.MANAGER,
        "destroy": Role.MANAGER,
    }
    serializer_class = CarrierSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CarrierService(repository=CarrierDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/carriers/"""
        carrier = self._service.create_carrier(CreateCarrierDTO.model_validate(request.data))
        return Response(CarrierSerializer(carrier).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/carriers/{pk}/ (includes the current ``active_orders``)."""
        carrier = self._service.get_carrier(pk)
        context = {"active_orders": self._service.active_orders(carrier)}
        return Response(CarrierSerializer(carrier, context=context).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/carriers/{pk}/"""
        carrier = self._service.update_carrier(pk, UpdateCarrierDTO.model_validate(request.data))
        return Response(CarrierSerializer(carrier).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/carriers/{pk}/"""
        return Response(self._service.delete_carrier(pk).model_dump(mode="json"))
