"""Order API views.

Exposes ``OrderService`` over HTTP.  Views parse input into DTOs, resolve
the caller into an ``Actor`` and let domain exceptions propagate to
``standardized_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.carriers.repositories import CarrierDjangoRepository
from modules.clients.repositories import ClientDjangoRepository
from modules.core.permissions import Actor, HasRole, Role
from modules.orders.dtos import ChangeStatusDTO, CreateOrderDTO, UpdateOrderDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories import ProductDjangoRepository
from modules.routes.repositories import RouteDjangoRepository
from modules.shipments.repositories import ShipmentStatusDjangoRepository


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.OPERATOR,
        "partial_update": Role.OPERATOR,
        "change_status": Role.OPERATOR,
        "destroy": Role.MANAGER,
    }
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            client_repository=ClientDjangoRepository(),
            product_repository=ProductDjangoRepository(),
            carrier_repository=CarrierDjangoRepository(),
            route_repository=RouteDjangoRepository(),
            status_repository=ShipmentStatusDjangoRepository(),
        )

    def get_throttles(self) -> list[BaseThrottle]:
        """Throttle scopes per action."""
        throttle_scope: str | None
        if self.action == "create":
            throttle_scope = "order_creation"
        elif self.action in {"partial_update", "change_status", "destroy"}:
            throttle_scope = "order_changes"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        dto = CreateOrderDTO.model_validate(request.data)
        order = self._service.create_order(dto, actor=Actor.from_user(request.user))
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        return Response(OrderSerializer(self._service.get_order(pk)).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/

        Edits references, quantity, notes and delivery estimate.  Status is
        changed through ``POST /orders/{pk}/status/``.
        """
        dto = UpdateOrderDTO.model_validate(request.data)
        order = self._service.update_order(pk, dto, actor=Actor.from_user(request.user))
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=["post"], url_path="status")
    def change_status(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/status/

        Cancelling restores stock; delivering stamps ``actual_delivery_date``.
        """
        dto = ChangeStatusDTO.model_validate(request.data)
        result = self._service.change_status(
            pk, dto.status, notes=dto.notes, actor=Actor.from_user(request.user)
        )
        return Response(result.model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        result = self._service.delete_order(pk, actor=Actor.from_user(request.user))
        return Response(result.model_dump(mode="json"))
