"""Order and OrderStatusHistory models.

Rules implemented here:
- Order number auto-generated as a human-readable identifier.
- Every foreign key uses PROTECT: referenced master data is deactivated,
  never deleted, while orders point at it.
- ``quantity`` is at least 1 (validator + DB constraint).
- ``notes`` only grows on status changes (``append_notes``).
- Each status change generates an append-only history record.

Transition validation, stock and capacity are enforced by ``OrderService``.
"""

from __future__ import annotations

import secrets
from decimal import Decimal
from typing import Any

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import ORDER_NUMBER_MAX_RETRIES
from shared.domain.events import DomainEventMixin


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root.

    ``order_number`` is generated on first save (format
    ``ORD-YYYYMMDD-XXXXXX``).  The UUIDv7 ``id`` is used for all internal
    references and API lookups.

    ``total`` is ``quantity * product.price`` at the time the quantity or
    product was last set; later price changes do not touch it.
    """

    order_number: models.CharField = models.CharField(
        max_length=20, unique=True, editable=False
    )
    client: models.ForeignKey = models.ForeignKey(
        "clients.Client",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    carrier: models.ForeignKey = models.ForeignKey(
        "carriers.Carrier",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    route: models.ForeignKey = models.ForeignKey(
        "routes.Route",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    shipment_status: models.ForeignKey = models.ForeignKey(
        "shipments.ShipmentStatus",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    total: models.DecimalField = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    order_date: models.DateTimeField = models.DateTimeField(default=timezone.now)
    estimated_delivery_date: models.DateField = models.DateField(null=True, blank=True)
    actual_delivery_date: models.DateTimeField = models.DateTimeField(
        null=True, blank=True
    )
    notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    @property
    def status_name(self) -> str:
        return self.shipment_status.name

    def append_notes(self, text: str) -> None:
        """Add ``text`` on a new line; existing notes are never overwritten."""
        text = (text or "").strip()
        if not text:
            return
        self.notes = f"{self.notes}\n{text}" if self.notes else text

    # ------------------------------------------------------------------
    # Order number generation
    # ------------------------------------------------------------------

    @staticmethod
    def generate_order_number() -> str:
        """Generate a human-readable order number: ``ORD-YYYYMMDD-XXXXXX``."""
        now = timezone.now()
        suffix = secrets.token_hex(3).upper()
        return f"ORD-{now:%Y%m%d}-{suffix}"

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self.order_number:
            for _ in range(ORDER_NUMBER_MAX_RETRIES):
                candidate = self.generate_order_number()
                if not Order.objects.filter(order_number=candidate).exists():
                    self.order_number = candidate
                    break
            else:
                raise RuntimeError(
                    f"Failed to generate unique order_number after "
                    f"{ORDER_NUMBER_MAX_RETRIES} attempts"
                )
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.order_number


class OrderStatusHistory(BaseModel):
    """Append-only audit trail for order status transitions.

    Statuses are stored by name so the trail stays readable even if a
    status row is later deactivated.  ``old_status`` is ``None`` for the
    creation record; an empty ``changed_by`` means the system acted.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="status_history",
    )
    old_status: models.CharField = models.CharField(  # noqa: DJ01
        max_length=20,
        null=True,
        blank=True,
    )
    new_status: models.CharField = models.CharField(max_length=20)
    changed_by: models.CharField = models.CharField(
        max_length=150, blank=True, default=""
    )
    notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "order_status_history"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["order", "created_at"],
                name="osh_order_created_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.order} : {self.old_status} -> {self.new_status}"
