"""Carrier domain exceptions."""

from __future__ import annotations

from typing import Any, Optional

from modules.core.exceptions import AlreadyExists, DomainError, NotFound


class CarrierNotFound(NotFound):
    entity = "carrier"


class CarrierAlreadyExists(AlreadyExists):
    """Another carrier is registered with the same document."""


class CarrierUnavailable(DomainError):
    """The carrier already holds as many active orders as it may."""

    code = "carrier_unavailable"
    status_code = 409

    def __init__(
        self, active_count: int, max_concurrent_orders: int, carrier_id: Optional[Any] = None
    ) -> None:
        super().__init__(
            f"Carrier is at capacity: {active_count} active orders "
            f"(max {max_concurrent_orders}).",
            active_count=active_count,
            max=max_concurrent_orders,
            carrier_id=str(carrier_id) if carrier_id is not None else None,
        )
        self.active_count = active_count
        self.max_concurrent_orders = max_concurrent_orders
