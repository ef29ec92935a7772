"""Domain events for the Products bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ProductStockLow(DomainEvent):
    """Raised when a reservation leaves stock at or below the minimum."""

    code: str
    stock: int
    stock_minimum: int
