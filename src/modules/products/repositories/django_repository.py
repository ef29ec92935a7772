"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising, and the Service Layer decides what a missing entity means.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db.models import F
from django.utils import timezone

from modules.products.events import ProductStockLow
from modules.products.exceptions import InsufficientStock, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from shared.infrastructure.bus import publish_on_commit

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by code (case-insensitive via upper normalisation)."""
        return Product.objects.filter(code=code.strip().upper()).first()

    def create(self, data: Dict[str, Any]) -> Product:
        product = Product.objects.create(**data)
        logger.info("product.saved", product_id=str(product.id), code=product.code)
        return product

    def save(self, entity: Product) -> Product:
        entity.save()
        logger.info("product.saved", product_id=str(entity.id), code=entity.code)
        return entity

    def delete(self, entity: Product) -> None:
        entity.delete()

    def is_referenced(self, entity: Product) -> bool:
        return entity.orders.exists()

    # ------------------------------------------------------------------
    # Stock (always inside the caller's transaction)
    # ------------------------------------------------------------------

    def get_for_update(self, id: str) -> Optional[Product]:
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def lock_many(self, ids: Iterable[str]) -> List[Product]:
        ordered = sorted({str(i) for i in ids})
        products = []
        for product_id in ordered:
            product = self.get_for_update(product_id)
            if product is not None:
                products.append(product)
        return products

    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Conditional ``UPDATE products SET stock = stock + delta``.

        The ``stock >= -delta`` guard makes the database refuse a negative
        result even if a caller skipped the locked pre-check.
        """
        updated = Product.objects.filter(id=product_id, stock__gte=-delta).update(
            stock=F("stock") + delta, updated_at=timezone.now()
        )
        product = self.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        if not updated:
            raise InsufficientStock(
                available=product.stock, requested=-delta, product_id=product.id
            )

        logger.info(
            "product.stock_adjusted",
            product_id=str(product.id),
            delta=delta,
            stock=product.stock,
        )
        if delta < 0 and product.is_low_stock:
            publish_on_commit(
                [
                    ProductStockLow(
                        aggregate_id=product.id,
                        code=product.code,
                        stock=product.stock,
                        stock_minimum=product.stock_minimum,
                    )
                ]
            )
        return product
