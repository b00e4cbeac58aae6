"""Domain events for the Order aggregate.

All events are versioned, immutable facts representing order state changes.
"""

from protean.fields import Date, DateTime, Float, Identifier, String

from sales.domain import sales


@sales.event(part_of="Order")
class OrderPlaced:
    """An order was recorded by the checkout flow."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_name = String(required=True)
    total = Float(required=True)
    placed_on = Date(required=True)
    status = String(required=True)
    placed_at = DateTime(required=True)


@sales.event(part_of="Order")
class OrderProcessing:
    """The seller started working on the order."""

    __version__ = 1

    order_id = Identifier(required=True)
    started_at = DateTime(required=True)


@sales.event(part_of="Order")
class OrderCompleted:
    """The order was fulfilled and can now be invoiced."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    completed_at = DateTime(required=True)


@sales.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
