"""Order aggregate (CQRS) — the seller's view of a placed order.

Orders are placed by the external checkout flow and only move forward through
a small state machine. The machine is enforced here, in the aggregate, so no
caller can push an order into an illegal state.

State Machine:
    PENDING → PROCESSING → COMPLETED
    PENDING → COMPLETED
    PENDING → CANCELLED
    PROCESSING → CANCELLED
"""

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.fields import Date, DateTime, Float, String

from sales.domain import sales
from sales.exceptions import InvalidOrderDate, InvalidTransition
from sales.order.events import (
    OrderCancelled,
    OrderCompleted,
    OrderPlaced,
    OrderProcessing,
)
from sales.reconciliation.dates import coerce_date


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {
        OrderStatus.PROCESSING,
        OrderStatus.COMPLETED,  # Direct "mark complete" from the dashboard
        OrderStatus.CANCELLED,
    },
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

TERMINAL_STATUSES = frozenset(status for status, targets in _VALID_TRANSITIONS.items() if not targets)


def parse_status(value) -> OrderStatus:
    """Accept an ``OrderStatus`` or its value, case-insensitively."""
    if isinstance(value, OrderStatus):
        return value
    for status in OrderStatus:
        if str(value).lower() in (status.value.lower(), status.name.lower()):
            return status
    raise InvalidTransition({"status": [f"Unknown order status: {value}"]})


@sales.aggregate
class Order:
    order_number = String(required=True, max_length=50)
    customer_name = String(required=True, max_length=255)
    placed_on = Date(required=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    total = Float(required=True, min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_name, total, placed_on, status=OrderStatus.PENDING):
        """Record a new order.

        ``placed_on`` may be a ``date``, ``datetime``, ISO string or the
        dashboard's "June 15, 2023" format. Unreadable dates are rejected here
        so they never reach revenue reporting.
        """
        order_date = coerce_date(placed_on)
        if order_date is None:
            raise InvalidOrderDate({"placed_on": [f"Unreadable order date: {placed_on!r}"]})

        initial_status = parse_status(status)
        now = datetime.now(UTC)
        order = cls(
            order_number=f"O-{uuid4().hex[:8].upper()}",
            customer_name=customer_name,
            placed_on=order_date,
            status=initial_status.value,
            total=total,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                customer_name=customer_name,
                total=order.total,
                placed_on=order_date,
                status=initial_status.value,
                placed_at=now,
            )
        )
        return order

    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATUSES

    def _assert_can_transition(self, target_status: OrderStatus) -> None:
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidTransition({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def transition_to(self, target_status) -> None:
        """Move to ``target_status`` if the state machine allows it."""
        target = parse_status(target_status)
        if target == OrderStatus.PROCESSING:
            self.mark_processing()
        elif target == OrderStatus.COMPLETED:
            self.complete()
        elif target == OrderStatus.CANCELLED:
            self.cancel()
        else:
            self._assert_can_transition(target)

    def mark_processing(self) -> None:
        self._assert_can_transition(OrderStatus.PROCESSING)
        now = datetime.now(UTC)
        self.status = OrderStatus.PROCESSING.value
        self.updated_at = now
        self.raise_(OrderProcessing(order_id=str(self.id), started_at=now))

    def complete(self) -> None:
        """Mark the order fulfilled. Only Completed orders can be invoiced."""
        self._assert_can_transition(OrderStatus.COMPLETED)
        previous = self.status
        now = datetime.now(UTC)
        self.status = OrderStatus.COMPLETED.value
        self.updated_at = now
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                previous_status=previous,
                completed_at=now,
            )
        )

    def cancel(self) -> None:
        self._assert_can_transition(OrderStatus.CANCELLED)
        previous = self.status
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = now
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                previous_status=previous,
                cancelled_at=now,
            )
        )
