"""Unit tests for ``OrderService.change_status``.

Covers:
- Every edge of the transition table (closure in both directions).
- Scenario B: cancellation restores stock, then the order is frozen.
- Delivery timestamp, appended notes and history rows.
- Carrier capacity when a NOT_DELIVERED order goes back IN_TRANSIT.
"""

from __future__ import annotations

from uuid import uuid4

import pytest
from freezegun import freeze_time

from django.utils import timezone

from modules.carriers.exceptions import CarrierUnavailable
from modules.core.permissions import Actor
from modules.orders.exceptions import IllegalTransition, OrderNotFound
from modules.orders.models import Order, OrderStatusHistory
from modules.shipments.constants import ACTIVE_STATUSES, VALID_TRANSITIONS, ShipmentStatusName
from modules.shipments.exceptions import ShipmentStatusNotFound

pytestmark = pytest.mark.unit

# Shortest path from PENDING to each status.
PATHS = {
    "PENDING": [],
    "PREPARATION": ["PREPARATION"],
    "IN_TRANSIT": ["PREPARATION", "IN_TRANSIT"],
    "DELIVERED": ["PREPARATION", "IN_TRANSIT", "DELIVERED"],
    "NOT_DELIVERED": ["PREPARATION", "IN_TRANSIT", "NOT_DELIVERED"],
    "CANCELLED": ["CANCELLED"],
}

ALL_PAIRS = [(current, requested) for current in PATHS for requested in PATHS]


def _drive(order_service, order, target):
    for step in PATHS[target]:
        order_service.change_status(order.id, step)
    return Order.objects.get(id=order.id)


class TestTransitionClosure:
    @pytest.mark.parametrize(("current", "requested"), ALL_PAIRS)
    def test_change_succeeds_iff_edge_exists(self, order_service, make_order, current, requested):
        order = _drive(order_service, make_order(), current)

        if requested in VALID_TRANSITIONS[current]:
            result = order_service.change_status(order.id, requested)
            assert result.previous_status == current
            assert result.new_status == requested
            assert Order.objects.get(id=order.id).status_name == requested
        else:
            with pytest.raises(IllegalTransition) as exc_info:
                order_service.change_status(order.id, requested)
            assert exc_info.value.current == current
            assert exc_info.value.allowed == sorted(VALID_TRANSITIONS[current])
            assert Order.objects.get(id=order.id).status_name == current

    @pytest.mark.parametrize("terminal", ["DELIVERED", "CANCELLED"])
    def test_terminal_statuses_have_no_exit(self, order_service, make_order, terminal):
        order = _drive(order_service, make_order(), terminal)

        for requested in PATHS:
            with pytest.raises(IllegalTransition):
                order_service.change_status(order.id, requested)


class TestChangeStatus:
    def test_cancel_restores_stock_then_freezes_order(self, order_service, make_order, make_product):
        product = make_product(stock=10)
        order = make_order(product=product, quantity=4)
        product.refresh_from_db()
        assert product.stock == 6

        order_service.change_status(order.id, "CANCELLED")

        product.refresh_from_db()
        assert product.stock == 10
        with pytest.raises(IllegalTransition):
            order_service.change_status(order.id, "PREPARATION")
        product.refresh_from_db()
        assert product.stock == 10

    @freeze_time("2025-06-15 12:00:00")
    def test_delivered_stamps_actual_delivery_date(self, order_service, make_order):
        order = make_order()
        assert order.actual_delivery_date is None

        order = _drive(order_service, order, "DELIVERED")

        assert order.actual_delivery_date == timezone.now()

    def test_status_name_is_normalised(self, order_service, make_order):
        order = make_order()

        result = order_service.change_status(order.id, "  preparation ")

        assert result.new_status == "PREPARATION"

    def test_notes_are_appended(self, order_service, make_order):
        order = make_order(notes="Leave at reception")

        order_service.change_status(order.id, "PREPARATION", notes="Packed")
        order_service.change_status(order.id, "IN_TRANSIT", notes="Left the depot")

        order.refresh_from_db()
        assert order.notes == "Leave at reception\nPacked\nLeft the depot"

    def test_history_records_each_transition(self, order_service, make_order):
        order = make_order()
        actor = Actor(id="7", roles=frozenset({"operator"}))

        order_service.change_status(order.id, "PREPARATION", notes="Packed", actor=actor)

        history = list(OrderStatusHistory.objects.filter(order=order))
        assert [(h.old_status, h.new_status) for h in history] == [
            (None, "PENDING"),
            ("PENDING", "PREPARATION"),
        ]
        assert history[1].notes == "Packed"
        assert history[1].changed_by == "7"

    def test_unknown_status_name(self, order_service, make_order):
        order = make_order()

        with pytest.raises(ShipmentStatusNotFound):
            order_service.change_status(order.id, "LOST")

    def test_missing_order(self, order_service, statuses):
        with pytest.raises(OrderNotFound):
            order_service.change_status(uuid4(), ShipmentStatusName.PREPARATION)

    def test_not_delivered_can_return_in_transit(self, order_service, make_order):
        order = _drive(order_service, make_order(), "NOT_DELIVERED")

        result = order_service.change_status(order.id, "IN_TRANSIT")

        assert result.previous_status == "NOT_DELIVERED"

    def test_in_transit_retry_is_refused_when_carrier_is_full(
        self, order_service, make_order, make_carrier
    ):
        carrier = make_carrier(max_concurrent_orders=1)
        stalled = _drive(order_service, make_order(carrier=carrier), "NOT_DELIVERED")
        make_order(carrier=carrier)

        with pytest.raises(CarrierUnavailable) as exc_info:
            order_service.change_status(stalled.id, "IN_TRANSIT")

        assert exc_info.value.active_count == 1
        assert exc_info.value.max_concurrent_orders == 1
        stalled.refresh_from_db()
        assert stalled.status_name == ShipmentStatusName.NOT_DELIVERED
        assert OrderStatusHistory.objects.filter(order=stalled, new_status="IN_TRANSIT").count() == 1

    def test_in_transit_retry_succeeds_once_capacity_frees_up(
        self, order_service, make_order, make_carrier
    ):
        carrier = make_carrier(max_concurrent_orders=1)
        stalled = _drive(order_service, make_order(carrier=carrier), "NOT_DELIVERED")
        blocking = make_order(carrier=carrier)
        order_service.change_status(blocking.id, "CANCELLED")

        result = order_service.change_status(stalled.id, "IN_TRANSIT")

        assert result.new_status == "IN_TRANSIT"
        assert Order.objects.filter(carrier=carrier, shipment_status__name__in=ACTIVE_STATUSES).count() == 1
