"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Nothing here
opens a transaction: every call runs inside the unit of work started by
``OrderService`` (``atomic_operation``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.orders.models import Order, OrderStatusHistory
from modules.orders.repositories.interfaces import IOrderRepository
from modules.shipments.constants import ACTIVE_STATUSES
from shared.infrastructure.bus import publish_on_commit

logger = structlog.get_logger(__name__)

_RELATIONS = ("client", "product", "carrier", "route", "shipment_status")


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations and history.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related(*_RELATIONS)
                .prefetch_related("status_history")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE).

        No joins: only the order row is locked here.  Product and carrier
        rows are locked afterwards, in that order, by the service.
        """
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def count_active_for_carrier(
        self, carrier_id: Any, exclude_order_id: Optional[Any] = None
    ) -> int:
        queryset = Order.objects.filter(
            carrier_id=carrier_id, shipment_status__name__in=ACTIVE_STATUSES
        )
        if exclude_order_id is not None:
            queryset = queryset.exclude(id=exclude_order_id)
        return queryset.count()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(**data)
        order.save()
        logger.info("order.inserted", order_id=str(order.id), order_number=order.order_number)
        return order

    def save(self, entity: Order) -> Order:
        entity.save()
        events = entity.pull_domain_events()
        publish_on_commit(events)
        logger.info("order.saved", order_id=str(entity.id), event_count=len(events))
        return entity

    def delete(self, entity: Order) -> None:
        order_id = str(entity.id)
        publish_on_commit(entity.pull_domain_events())
        entity.delete()
        logger.info("order.deleted_row", order_id=order_id)

    def add_history(
        self,
        order: Order,
        new_status: str,
        old_status: Optional[str] = None,
        notes: str = "",
        changed_by: str = "",
    ) -> OrderStatusHistory:
        history = OrderStatusHistory.objects.create(
            order=order,
            old_status=old_status,
            new_status=new_status,
            notes=notes,
            changed_by=changed_by,
        )
        logger.info(
            "order.history_added",
            order_id=str(order.id),
            old_status=old_status,
            new_status=new_status,
        )
        return history
