"""Order repository interface.

Extends ``IRepository[Order]`` with what the lifecycle engine needs: row
locking, status history and the carrier load query.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderStatusHistory


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    ``save`` and ``delete`` publish the aggregate's pending domain events
    once the surrounding transaction commits.
    """

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def add_history(
        self,
        order: Order,
        new_status: str,
        old_status: Optional[str] = None,
        notes: str = "",
        changed_by: str = "",
    ) -> OrderStatusHistory:
        """Record a status change in the order's audit trail."""

    @abstractmethod
    def count_active_for_carrier(
        self, carrier_id: Any, exclude_order_id: Optional[Any] = None
    ) -> int:
        """Orders of ``carrier_id`` in PENDING, PREPARATION or IN_TRANSIT."""
