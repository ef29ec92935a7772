from django.apps import AppConfig


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.events import ProductStockLow
        from modules.products.handlers import product_stock_low_handler
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(ProductStockLow, product_stock_low_handler)
