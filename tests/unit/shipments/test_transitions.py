"""Unit tests for the fixed status transition table."""

from __future__ import annotations

import pytest

from modules.shipments.constants import (
    ACTIVE_STATUSES,
    DELETABLE_STATUSES,
    EDITABLE_STATUSES,
    TERMINAL_STATUSES,
    VALID_TRANSITIONS,
    ShipmentStatusName,
    allowed_transitions,
    is_allowed,
)

pytestmark = pytest.mark.unit

EDGES = {
    ("PENDING", "PREPARATION"),
    ("PENDING", "CANCELLED"),
    ("PREPARATION", "IN_TRANSIT"),
    ("PREPARATION", "CANCELLED"),
    ("IN_TRANSIT", "DELIVERED"),
    ("IN_TRANSIT", "NOT_DELIVERED"),
    ("NOT_DELIVERED", "IN_TRANSIT"),
}


class TestTransitionTable:
    def test_every_status_has_an_entry(self):
        assert set(VALID_TRANSITIONS) == set(ShipmentStatusName.values)

    @pytest.mark.parametrize("current", ShipmentStatusName.values)
    @pytest.mark.parametrize("requested", ShipmentStatusName.values)
    def test_is_allowed_matches_edges(self, current, requested):
        assert is_allowed(current, requested) is ((current, requested) in EDGES)

    @pytest.mark.parametrize("terminal", sorted(TERMINAL_STATUSES))
    def test_terminal_statuses_have_no_targets(self, terminal):
        assert allowed_transitions(terminal) == []

    def test_allowed_transitions_sorted(self):
        assert allowed_transitions("PENDING") == ["CANCELLED", "PREPARATION"]
        assert allowed_transitions("IN_TRANSIT") == ["DELIVERED", "NOT_DELIVERED"]

    def test_unknown_or_missing_current(self):
        assert allowed_transitions(None) == []
        assert not is_allowed(None, "PENDING")
        assert not is_allowed("LOST", "PENDING")

    def test_status_groups(self):
        assert ACTIVE_STATUSES == {"PENDING", "PREPARATION", "IN_TRANSIT"}
        assert EDITABLE_STATUSES == {"PENDING", "PREPARATION"}
        assert DELETABLE_STATUSES == {"PENDING", "CANCELLED"}
