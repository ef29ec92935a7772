"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Product code must be unique.
- Stock is set once at creation; afterwards only orders move it.
- Referenced products are deactivated rather than deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.core.deletion import DeletionResultDTO, delete_or_deactivate
from modules.core.transactions import atomic_operation
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @atomic_operation
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing code uniqueness.

        Raises:
            ProductAlreadyExists: the code is already taken.
        """
        log = logger.bind(code=dto.code)

        if self._repo.get_by_code(dto.code):
            log.warning("product.duplicate_code")
            raise ProductAlreadyExists(
                f"Product code '{dto.code}' already registered.", code=dto.code
            )

        product = self._repo.create(dto.model_dump())
        log.info("product.created", product_id=str(product.id), stock=product.stock)
        return product

    @atomic_operation
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: the product does not exist.
        """
        product = self.get_product(id)
        changes = dto.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    @atomic_operation
    def delete_product(self, id: str) -> DeletionResultDTO:
        """Delete the product, or deactivate it when orders reference it.

        Raises:
            ProductNotFound: the product does not exist.
        """
        return delete_or_deactivate(self.get_product(id), self._repo)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(id)
        return product
