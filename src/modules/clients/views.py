"""Client API views.

Exposes the ``ClientService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to ``modules.core.exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.clients.dtos import CreateClientDTO, UpdateClientDTO
from modules.clients.repositories import ClientDjangoRepository
from modules.clients.serializers import ClientSerializer
from modules.clients.services import ClientService
from modules.core.permissions import HasRole, Role


class ClientViewSet(GenericViewSet):
    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.MANAGER,
        "partial_update": Role.MANAGER,
        "destroy": Role.MANAGER,
    }
    serializer_class = ClientSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ClientService(repository=ClientDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/clients/"""
        client = self._service.create_client(CreateClientDTO.model_validate(request.data))
        return Response(ClientSerializer(client).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/clients/{pk}/"""
        return Response(ClientSerializer(self._service.get_client(pk)).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/clients/{pk}/"""
        client = self._service.update_client(pk, UpdateClientDTO.model_validate(request.data))
        return Response(ClientSerializer(client).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/clients/{pk}/"""
        return Response(self._service.delete_client(pk).model_dump(mode="json"))
