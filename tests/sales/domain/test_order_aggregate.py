"""Tests for Order aggregate creation and transition events."""

from datetime import date

import pytest
from protean.exceptions import ValidationError
from sales.exceptions import InvalidOrderDate
from sales.order.events import OrderCancelled, OrderCompleted, OrderPlaced, OrderProcessing
from sales.order.order import Order, OrderStatus


def _make_order(**overrides):
    defaults = {
        "customer_name": "John Doe",
        "total": 120.00,
        "placed_on": date(2023, 6, 15),
    }
    defaults.update(overrides)
    return Order.create(**defaults)


class TestOrderCreation:
    def test_create_defaults_to_pending(self):
        order = _make_order()
        assert order.status == OrderStatus.PENDING.value

    def test_create_accepts_initial_status(self):
        order = _make_order(status="Completed")
        assert order.status == OrderStatus.COMPLETED.value

    def test_create_generates_order_number(self):
        order = _make_order()
        assert order.order_number.startswith("O-")

    def test_create_sets_fields(self):
        order = _make_order()
        assert order.customer_name == "John Doe"
        assert order.total == 120.00
        assert order.placed_on == date(2023, 6, 15)

    def test_create_generates_unique_ids(self):
        assert str(_make_order().id) != str(_make_order().id)

    def test_create_parses_display_date(self):
        order = _make_order(placed_on="June 15, 2023")
        assert order.placed_on == date(2023, 6, 15)

    def test_create_parses_iso_date(self):
        order = _make_order(placed_on="2023-06-15")
        assert order.placed_on == date(2023, 6, 15)

    def test_create_rejects_unreadable_date(self):
        with pytest.raises(InvalidOrderDate):
            _make_order(placed_on="15th of Juneish")

    def test_create_rejects_negative_total(self):
        with pytest.raises(ValidationError):
            _make_order(total=-1.0)

    def test_create_raises_event(self):
        order = _make_order()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_number == order.order_number
        assert event.status == OrderStatus.PENDING.value


class TestOrderTransitionEvents:
    def test_mark_processing_raises_event(self):
        order = _make_order()
        order._events.clear()
        order.mark_processing()
        assert isinstance(order._events[0], OrderProcessing)

    def test_complete_raises_event_with_previous_status(self):
        order = _make_order()
        order._events.clear()
        order.complete()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderCompleted)
        assert event.previous_status == OrderStatus.PENDING.value

    def test_cancel_raises_event(self):
        order = _make_order()
        order.mark_processing()
        order._events.clear()
        order.cancel()
        event = order._events[0]
        assert isinstance(event, OrderCancelled)
        assert event.previous_status == OrderStatus.PROCESSING.value

    def test_transition_updates_timestamp(self):
        order = _make_order()
        before = order.updated_at
        order.complete()
        assert order.updated_at >= before
