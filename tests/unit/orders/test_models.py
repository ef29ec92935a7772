"""Unit tests for the Order model helpers."""

from __future__ import annotations

import re

import pytest

from modules.orders.events import OrderCreated
from modules.orders.models import Order

pytestmark = pytest.mark.unit


class TestOrderModel:
    def test_order_number_format(self):
        assert re.fullmatch(r"ORD-\d{8}-[0-9A-F]{6}", Order.generate_order_number())

    def test_append_notes_never_overwrites(self):
        order = Order(notes="")
        order.append_notes("first")
        order.append_notes("   ")
        order.append_notes("second")

        assert order.notes == "first\nsecond"

    def test_pull_domain_events_clears_pending(self):
        order = Order()
        event = OrderCreated(aggregate_id=order.id, order_number="ORD-1", quantity=1)
        order.add_domain_event(event)

        assert order.pull_domain_events() == [event]
        assert order.domain_events == []

    def test_created_order_has_history_prefetched(self, make_order):
        order = make_order()

        assert [h.new_status for h in order.status_history.all()] == ["PENDING"]
