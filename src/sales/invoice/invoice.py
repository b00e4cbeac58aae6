"""Invoice aggregate (CQRS) — billing a completed order.

An invoice snapshots the order it bills (customer and total) at the moment it
is issued. Its paid flag is a plain toggle with no state machine: sellers
correct payment records in either direction.
"""

from datetime import UTC, datetime
from uuid import uuid4

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from sales.domain import sales
from sales.invoice.events import InvoiceCreated, InvoicePaid, InvoiceUnpaid

DEFAULT_DESCRIPTION_TEMPLATE = "Services for order {order}"


def render_description(template: str | None, order) -> str:
    """Fill ``{order}`` with the order's human reference."""
    return (template or DEFAULT_DESCRIPTION_TEMPLATE).replace("{order}", order.order_number)


@sales.aggregate
class Invoice:
    order_id = Identifier(required=True)
    invoice_number = String(required=True, max_length=50)
    customer_name = String(required=True, max_length=255)
    description = Text()
    total = Float(required=True, min_value=0.0)
    issued_at = DateTime(required=True)
    is_paid = Boolean(default=False)
    paid_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, order, description_template: str | None = None):
        """Issue an invoice for ``order``.

        Precondition checks (order completed, not yet invoiced) live in the
        CreateInvoice handler, which can see both stores.
        """
        now = datetime.now(UTC)
        invoice = cls(
            order_id=str(order.id),
            invoice_number=f"INV-{uuid4().hex[:8].upper()}",
            customer_name=order.customer_name,
            description=render_description(description_template, order),
            total=order.total,
            issued_at=now,
            is_paid=False,
            created_at=now,
            updated_at=now,
        )
        invoice.raise_(
            InvoiceCreated(
                invoice_id=str(invoice.id),
                order_id=str(order.id),
                invoice_number=invoice.invoice_number,
                customer_name=invoice.customer_name,
                total=invoice.total,
                issued_at=now,
            )
        )
        return invoice

    def set_paid(self, paid: bool) -> bool:
        """Set the paid flag. Returns False when it already had that value."""
        paid = bool(paid)
        if bool(self.is_paid) == paid:
            return False

        now = datetime.now(UTC)
        self.is_paid = paid
        self.updated_at = now
        if paid:
            self.paid_at = now
            self.raise_(
                InvoicePaid(
                    invoice_id=str(self.id),
                    order_id=str(self.order_id),
                    total=self.total,
                    paid_at=now,
                )
            )
        else:
            self.paid_at = None
            self.raise_(
                InvoiceUnpaid(
                    invoice_id=str(self.id),
                    order_id=str(self.order_id),
                    total=self.total,
                    reverted_at=now,
                )
            )
        return True
