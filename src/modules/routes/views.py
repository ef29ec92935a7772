"""Route API views."""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.carriers.repositories import CarrierDjangoRepository
from modules.core.permissions import HasRole, Role
from modules.routes.dtos import CreateRouteDTO, UpdateRouteDTO
from modules.routes.repositories import RouteDjangoRepository
from modules.routes.serializers import RouteSerializer
from modules.routes.services import RouteService


class RouteViewSet(GenericViewSet):
    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.MANAGER,
        "partial_update": Role.MANAGER,
        "destroy": Role.MANAGER,
    }
    serializer_class = RouteSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = RouteService(
            repository=RouteDjangoRepository(),
            carrier_repository=CarrierDjangoRepository(),
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/routes/"""
        route = self._service.create_route(CreateRouteDTO.model_validate(request.data))
        return Response(RouteSerializer(route).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/routes/{pk}/"""
        return Response(RouteSerializer(self._service.get_route(pk)).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/routes/{pk}/"""
        route = self._service.update_route(pk, UpdateRouteDTO.model_validate(request.data))
        return Response(RouteSerializer(route).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/routes/{pk}/"""
        return Response(self._service.delete_route(pk).model_dump(mode="json"))

    @action(detail=True, methods=["get"], url_path="availability")
    def availability(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/routes/{pk}/availability/"""
        return Response(self._service.check_availability(pk).model_dump(mode="json"))
