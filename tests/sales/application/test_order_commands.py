"""Application tests for order placement and status commands."""

from datetime import date

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from sales.exceptions import InvalidOrderDate, InvalidTransition
from sales.order.order import Order, OrderStatus
from sales.order.placement import PlaceOrder
from sales.order.status import ChangeOrderStatus, MarkOrderComplete


def _place_order(**overrides):
    defaults = {
        "customer_name": "Mary Williams",
        "total": 150.25,
        "placed_on": "June 18, 2023",
    }
    defaults.update(overrides)
    return current_domain.process(PlaceOrder(**defaults), asynchronous=False)


class TestPlaceOrder:
    def test_place_returns_order_id(self):
        assert _place_order() is not None

    def test_place_persists_order(self):
        order_id = _place_order()
        order = current_domain.repository_for(Order).get(order_id)
        assert order.customer_name == "Mary Williams"
        assert order.placed_on == date(2023, 6, 18)
        assert order.status == OrderStatus.PENDING.value

    def test_place_with_initial_status(self):
        order_id = _place_order(status="Processing")
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.PROCESSING.value

    def test_place_rejects_malformed_date(self):
        with pytest.raises(InvalidOrderDate):
            _place_order(placed_on="someday")
        assert current_domain.repository_for(Order).list_all() == []

    def test_list_all_keeps_insertion_order(self):
        ids = [_place_order(customer_name=f"Customer {index}") for index in range(12)]
        listed = current_domain.repository_for(Order).list_all()
        assert [str(order.id) for order in listed] == ids


class TestChangeOrderStatus:
    def test_pending_to_processing(self):
        order_id = _place_order()
        status = current_domain.process(
            ChangeOrderStatus(order_id=order_id, status="Processing"),
            asynchronous=False,
        )
        assert status == OrderStatus.PROCESSING.value
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.PROCESSING.value

    def test_completed_to_processing_fails(self):
        order_id = _place_order(status="Completed")
        with pytest.raises(InvalidTransition):
            current_domain.process(
                ChangeOrderStatus(order_id=order_id, status="Processing"),
                asynchronous=False,
            )
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.COMPLETED.value

    def test_cancelled_order_cannot_change(self):
        order_id = _place_order(status="Cancelled")
        with pytest.raises(InvalidTransition):
            current_domain.process(
                ChangeOrderStatus(order_id=order_id, status="Completed"),
                asynchronous=False,
            )

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                ChangeOrderStatus(order_id="missing-order", status="Completed"),
                asynchronous=False,
            )


class TestMarkOrderComplete:
    def test_completes_pending_order(self):
        order_id = _place_order()
        current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.COMPLETED.value

    def test_completes_processing_order(self):
        order_id = _place_order(status="Processing")
        current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).status == OrderStatus.COMPLETED.value

    def test_second_call_is_noop(self):
        order_id = _place_order()
        current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False)
        first = current_domain.repository_for(Order).get(order_id)

        current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False)
        second = current_domain.repository_for(Order).get(order_id)

        assert second.status == first.status == OrderStatus.COMPLETED.value
        assert second.updated_at == first.updated_at

    def test_cancelled_order_is_left_alone(self):
        order_id = _place_order(status="Cancelled")
        status = current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False)
        assert status == OrderStatus.CANCELLED.value
