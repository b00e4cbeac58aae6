"""Domain events for the Invoice aggregate.

All events are versioned, immutable facts representing invoice state changes.
"""

from protean.fields import DateTime, Float, Identifier, String

from sales.domain import sales


@sales.event(part_of="Invoice")
class InvoiceCreated:
    """An invoice was issued for a completed order."""

    __version__ = 1

    invoice_id = Identifier(required=True)
    order_id = Identifier(required=True)
    invoice_number = String(required=True)
    customer_name = String(required=True)
    total = Float(required=True)
    issued_at = DateTime(required=True)


@sales.event(part_of="Invoice")
class InvoicePaid:
    """The seller recorded payment of the invoice."""

    __version__ = 1

    invoice_id = Identifier(required=True)
    order_id = Identifier(required=True)
    total = Float(required=True)
    paid_at = DateTime(required=True)


@sales.event(part_of="Invoice")
class InvoiceUnpaid:
    """A payment record was corrected: the invoice is outstanding again."""

    __version__ = 1

    invoice_id = Identifier(required=True)
    order_id = Identifier(required=True)
    total = Float(required=True)
    reverted_at = DateTime(required=True)
