"""Unit tests for ``OrderService.update_order``.

Covers:
- Scenario D: orders past PREPARATION are not editable.
- Stock re-balancing for quantity and product changes.
- Carrier capacity and reference checks on change.
- Notes replacement and delivery estimate.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from modules.carriers.exceptions import CarrierUnavailable
from modules.core.exceptions import InactiveReference
from modules.orders.dtos import UpdateOrderDTO
from modules.orders.exceptions import OrderNotEditable
from modules.orders.models import Order
from modules.products.exceptions import InsufficientStock

pytestmark = pytest.mark.unit


class TestUpdateOrder:
    def test_delivered_order_is_not_editable(self, order_service, make_order):
        order = make_order(quantity=2)
        for step in ("PREPARATION", "IN_TRANSIT", "DELIVERED"):
            order_service.change_status(order.id, step)

        with pytest.raises(OrderNotEditable) as exc_info:
            order_service.update_order(order.id, UpdateOrderDTO(quantity=5))

        assert exc_info.value.current_status == "DELIVERED"
        assert Order.objects.get(id=order.id).quantity == 2

    def test_cancelled_order_is_not_editable(self, order_service, make_order):
        order = make_order()
        order_service.change_status(order.id, "CANCELLED")

        with pytest.raises(OrderNotEditable):
            order_service.update_order(order.id, UpdateOrderDTO(notes="late edit"))

    def test_quantity_increase_takes_more_stock(self, order_service, make_order, make_product):
        product = make_product(stock=10, price=Decimal("4.00"))
        order = make_order(product=product, quantity=3)

        updated = order_service.update_order(order.id, UpdateOrderDTO(quantity=5))

        product.refresh_from_db()
        assert product.stock == 5
        assert updated.quantity == 5
        assert updated.total == Decimal("20.00")

    def test_quantity_decrease_releases_stock(self, order_service, make_order, make_product):
        product = make_product(stock=10)
        order = make_order(product=product, quantity=6)

        order_service.update_order(order.id, UpdateOrderDTO(quantity=1))

        product.refresh_from_db()
        assert product.stock == 9

    def test_same_product_counts_current_reservation(self, order_service, make_order, make_product):
        product = make_product(stock=5)
        order = make_order(product=product, quantity=3)

        order_service.update_order(order.id, UpdateOrderDTO(quantity=5))

        product.refresh_from_db()
        assert product.stock == 0

    def test_quantity_beyond_available_fails_without_writes(
        self, order_service, make_order, make_product
    ):
        product = make_product(stock=5)
        order = make_order(product=product, quantity=3)

        with pytest.raises(InsufficientStock) as exc_info:
            order_service.update_order(order.id, UpdateOrderDTO(quantity=6))

        assert exc_info.value.available == 5
        assert exc_info.value.requested == 6
        product.refresh_from_db()
        assert product.stock == 2
        assert Order.objects.get(id=order.id).quantity == 3

    def test_product_change_moves_reservation(self, order_service, make_order, make_product):
        old = make_product(stock=10)
        new = make_product(stock=8, price=Decimal("2.50"))
        order = make_order(product=old, quantity=4)

        updated = order_service.update_order(
            order.id, UpdateOrderDTO(product_id=new.id, quantity=2)
        )

        old.refresh_from_db()
        new.refresh_from_db()
        assert old.stock == 10
        assert new.stock == 6
        assert updated.product_id == new.id
        assert updated.total == Decimal("5.00")

    def test_product_change_uses_new_product_stock_only(
        self, order_service, make_order, make_product
    ):
        old = make_product(stock=10)
        new = make_product(stock=3)
        order = make_order(product=old, quantity=4)

        with pytest.raises(InsufficientStock):
            order_service.update_order(order.id, UpdateOrderDTO(product_id=new.id))

        old.refresh_from_db()
        new.refresh_from_db()
        assert old.stock == 6
        assert new.stock == 3

    def test_inactive_new_product_is_rejected(self, order_service, make_order, make_product):
        order = make_order()
        other = make_product()
        other.deactivate()

        with pytest.raises(InactiveReference):
            order_service.update_order(order.id, UpdateOrderDTO(product_id=other.id))

    def test_carrier_change_respects_capacity(self, order_service, make_order, make_carrier):
        busy = make_carrier(max_concurrent_orders=1)
        make_order(carrier=busy)
        order = make_order()

        with pytest.raises(CarrierUnavailable):
            order_service.update_order(order.id, UpdateOrderDTO(carrier_id=busy.id))

    def test_carrier_change(self, order_service, make_order, make_carrier):
        order = make_order()
        other = make_carrier()

        updated = order_service.update_order(order.id, UpdateOrderDTO(carrier_id=other.id))

        assert updated.carrier_id == other.id

    def test_inactive_client_is_rejected(self, order_service, make_order, make_client):
        order = make_order()
        client = make_client()
        client.deactivate()

        with pytest.raises(InactiveReference):
            order_service.update_order(order.id, UpdateOrderDTO(client_id=client.id))

    def test_notes_are_replaced_and_estimate_can_be_cleared(self, order_service, make_order):
        order = make_order(notes="first", estimated_delivery_date=date(2030, 1, 15))

        updated = order_service.update_order(
            order.id, UpdateOrderDTO(notes="second", estimated_delivery_date=None)
        )

        assert updated.notes == "second"
        assert updated.estimated_delivery_date is None

    def test_editable_while_in_preparation(self, order_service, make_order):
        order = make_order()
        order_service.change_status(order.id, "PREPARATION")

        updated = order_service.update_order(order.id, UpdateOrderDTO(notes="ok"))

        assert updated.notes == "ok"
        assert updated.status_name == "PREPARATION"
