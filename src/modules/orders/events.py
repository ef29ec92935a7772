"""Domain events for the Orders bounded context.

Published with ``transaction.on_commit``: handlers only see committed work.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    """Raised when an order is created."""

    order_number: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class OrderStatusChanged(DomainEvent):
    """Raised on every successful status transition."""

    previous_status: str
    new_status: str


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(DomainEvent):
    """Raised when an order is cancelled and its stock released."""

    quantity_restored: int


@dataclass(frozen=True, kw_only=True)
class OrderDeleted(DomainEvent):
    """Raised when an order row is removed."""

    order_number: str
    quantity_restored: int
