"""Shipment status vocabulary and the order lifecycle transition table.

The graph is fixed data, not configuration::

    PENDING       -> PREPARATION, CANCELLED
    PREPARATION   -> IN_TRANSIT, CANCELLED
    IN_TRANSIT    -> DELIVERED, NOT_DELIVERED
    NOT_DELIVERED -> IN_TRANSIT
    DELIVERED, CANCELLED are terminal.

Every order starts in PENDING.  No self-transitions exist.
"""

from __future__ import annotations

from django.db import models


class ShipmentStatusName(models.TextChoices):
    PENDING = "PENDING", "Pending"
    PREPARATION = "PREPARATION", "In preparation"
    IN_TRANSIT = "IN_TRANSIT", "In transit"
    DELIVERED = "DELIVERED", "Delivered"
    NOT_DELIVERED = "NOT_DELIVERED", "Not delivered"
    CANCELLED = "CANCELLED", "Cancelled"


INITIAL_STATUS = ShipmentStatusName.PENDING

VALID_TRANSITIONS: dict[str, frozenset[str]] = {
    ShipmentStatusName.PENDING: frozenset(
        {ShipmentStatusName.PREPARATION, ShipmentStatusName.CANCELLED}
    ),
    ShipmentStatusName.PREPARATION: frozenset(
        {ShipmentStatusName.IN_TRANSIT, ShipmentStatusName.CANCELLED}
    ),
    ShipmentStatusName.IN_TRANSIT: frozenset(
        {ShipmentStatusName.DELIVERED, ShipmentStatusName.NOT_DELIVERED}
    ),
    ShipmentStatusName.DELIVERED: frozenset(),
    ShipmentStatusName.NOT_DELIVERED: frozenset({ShipmentStatusName.IN_TRANSIT}),
    ShipmentStatusName.CANCELLED: frozenset(),
}

# Orders in these statuses count against a carrier's capacity.
ACTIVE_STATUSES: frozenset[str] = frozenset(
    {
        ShipmentStatusName.PENDING,
        ShipmentStatusName.PREPARATION,
        ShipmentStatusName.IN_TRANSIT,
    }
)
TERMINAL_STATUSES: frozenset[str] = frozenset(
    {ShipmentStatusName.DELIVERED, ShipmentStatusName.CANCELLED}
)
EDITABLE_STATUSES: frozenset[str] = frozenset(
    {ShipmentStatusName.PENDING, ShipmentStatusName.PREPARATION}
)
DELETABLE_STATUSES: frozenset[str] = frozenset(
    {ShipmentStatusName.PENDING, ShipmentStatusName.CANCELLED}
)

# (name, description, color, display_order) seeded for a fresh installation.
DEFAULT_STATUSES: tuple[tuple[str, str, str, int], ...] = (
    (ShipmentStatusName.PENDING, "Order received, waiting for preparation", "#FFA500", 1),
    (ShipmentStatusName.PREPARATION, "Order is being prepared for dispatch", "#0000FF", 2),
    (ShipmentStatusName.IN_TRANSIT, "Order is on its way to the client", "#008000", 3),
    (ShipmentStatusName.DELIVERED, "Order delivered to the client", "#008000", 4),
    (ShipmentStatusName.NOT_DELIVERED, "Delivery attempt failed", "#FF0000", 5),
    (ShipmentStatusName.CANCELLED, "Order cancelled", "#FF0000", 6),
)


def is_allowed(current: str | None, requested: str) -> bool:
    """Return ``True`` when the table has an edge ``current -> requested``."""
    return requested in VALID_TRANSITIONS.get(current or "", frozenset())


def allowed_transitions(current: str | None) -> list[str]:
    """Sorted targets reachable from ``current`` (empty when unknown)."""
    return sorted(str(name) for name in VALID_TRANSITIONS.get(current or "", ()))
