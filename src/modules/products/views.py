"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to ``modules.core.exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.permissions import HasRole, Role
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.repositories import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """Create / retrieve / patch / delete for products.

    Does **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.
    """

    permission_classes = [IsAuthenticated, HasRole]
    required_roles = {
        "create": Role.MANAGER,
        "partial_update": Role.MANAGER,
        "destroy": Role.MANAGER,
    }
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO.model_validate(request.data)
        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        return Response(ProductSerializer(self._service.get_product(pk)).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        dto = UpdateProductDTO.model_validate(request.data)
        product = self._service.update_product(pk, dto)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        result = self._service.delete_product(pk)
        return Response(result.model_dump(mode="json"))
