"""Event handlers for Products domain events."""

from __future__ import annotations

import structlog

from modules.products.events import ProductStockLow
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class ProductStockLowHandler(IEventHandler[ProductStockLow]):
    def handle(self, event: ProductStockLow) -> None:
        logger.warning(
            "product.stock_low",
            product_id=str(event.aggregate_id),
            **event.payload(),
        )


product_stock_low_handler = ProductStockLowHandler()
