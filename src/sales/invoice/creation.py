"""Invoice creation — command and handler.

Enforces the cross-aggregate preconditions at handler level: the order must
exist, be Completed, and not have an invoice yet. The check-then-add is only
race-free when callers serialize commands (DashboardController holds a lock
around every command).
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from sales.domain import logger, sales
from sales.exceptions import DuplicateInvoice, OrderNotCompleted, OrderNotFound
from sales.invoice.invoice import Invoice
from sales.order.order import Order, OrderStatus


@sales.command(part_of="Invoice")
class CreateInvoice:
    """Issue an invoice for a completed order."""

    order_id = Identifier(required=True)
    description_template = String(max_length=500)  # "{order}" is replaced by the order number


@sales.command_handler(part_of=Invoice)
class CreateInvoiceHandler:
    @handle(CreateInvoice)
    def create_invoice(self, command):
        try:
            order = current_domain.repository_for(Order).get(command.order_id)
        except ObjectNotFoundError:
            raise OrderNotFound({"order_id": [f"Order {command.order_id} does not exist"]}) from None

        if order.status != OrderStatus.COMPLETED.value:
            raise OrderNotCompleted(
                {"order_id": [f"Order {order.order_number} is {order.status}; only Completed orders can be invoiced"]}
            )

        repo = current_domain.repository_for(Invoice)
        existing = repo.find_by_order(str(order.id))
        if existing is not None:
            raise DuplicateInvoice(
                {"order_id": [f"Order {order.order_number} already has invoice {existing.invoice_number}"]}
            )

        invoice = Invoice.create(order, description_template=command.description_template)
        repo.add(invoice)
        logger.info(
            "Invoice created",
            invoice_id=str(invoice.id),
            invoice_number=invoice.invoice_number,
            order_id=str(order.id),
            total=invoice.total,
        )
        return str(invoice.id)
