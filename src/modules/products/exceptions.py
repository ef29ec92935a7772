"""Product domain exceptions.

Raised by the Service Layer (and by ``adjust_stock``) when business rules
are violated.  ``modules.core.exception_handler`` renders them.
"""

from __future__ import annotations

from typing import Any, Optional

from modules.core.exceptions import AlreadyExists, DomainError, NotFound


class ProductAlreadyExists(AlreadyExists):
    """A product with the same code already exists."""


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    entity = "product"


class InsufficientStock(DomainError):
    """Stock cannot cover the requested quantity.

    Never leaves the stock negative: it is raised before any write, or by the
    conditional update that would otherwise have crossed zero.
    """

    code = "insufficient_stock"
    status_code = 409

    def __init__(
        self, available: int, requested: int, product_id: Optional[Any] = None
    ) -> None:
        super().__init__(
            f"Insufficient stock: requested {requested}, available {available}.",
            available=available,
            requested=requested,
            product_id=str(product_id) if product_id is not None else None,
        )
        self.available = available
        self.requested = requested
