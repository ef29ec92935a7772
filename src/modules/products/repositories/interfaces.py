"""Product repository interface.

Extends ``IMasterDataRepository[Product]`` with the look-ups required by
code uniqueness and the stock operations used by the order engine.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IMasterDataRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IMasterDataRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by code."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Returns ``None`` if the product does not exist.
        """

    @abstractmethod
    def lock_many(self, ids: Iterable[str]) -> List[Product]:
        """Lock several products in ascending id order (deadlock avoidance)."""

    @abstractmethod
    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Add ``delta`` to the stock unless the result would be negative.

        Must run inside the caller's transaction.  Raises
        ``InsufficientStock`` instead of crossing zero.
        """
