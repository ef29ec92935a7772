"""Unit tests for ``OrderService.delete_order``."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.orders.exceptions import OrderNotDeletable, OrderNotFound
from modules.orders.models import Order, OrderStatusHistory

pytestmark = pytest.mark.unit


class TestDeleteOrder:
    def test_pending_order_is_deleted_and_stock_restored(
        self, order_service, make_order, make_product
    ):
        product = make_product(stock=10)
        order = make_order(product=product, quantity=4)

        result = order_service.delete_order(order.id)

        assert result.id == order.id
        assert not Order.objects.filter(id=order.id).exists()
        assert not OrderStatusHistory.objects.filter(order_id=order.id).exists()
        product.refresh_from_db()
        assert product.stock == 10

    def test_cancelled_order_does_not_restore_twice(
        self, order_service, make_order, make_product
    ):
        product = make_product(stock=10)
        order = make_order(product=product, quantity=4)
        order_service.change_status(order.id, "CANCELLED")

        order_service.delete_order(order.id)

        product.refresh_from_db()
        assert product.stock == 10

    @pytest.mark.parametrize(
        ("path", "status"),
        [
            (["PREPARATION"], "PREPARATION"),
            (["PREPARATION", "IN_TRANSIT"], "IN_TRANSIT"),
            (["PREPARATION", "IN_TRANSIT", "DELIVERED"], "DELIVERED"),
        ],
    )
    def test_other_statuses_are_not_deletable(
        self, order_service, make_order, make_product, path, status
    ):
        product = make_product(stock=10)
        order = make_order(product=product, quantity=2)
        for step in path:
            order_service.change_status(order.id, step)

        with pytest.raises(OrderNotDeletable) as exc_info:
            order_service.delete_order(order.id)

        assert exc_info.value.current_status == status
        assert Order.objects.filter(id=order.id).exists()
        product.refresh_from_db()
        assert product.stock == 8

    def test_missing_order(self, order_service, statuses):
        with pytest.raises(OrderNotFound):
            order_service.delete_order(uuid4())
