"""Invoice payment flag — command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from sales.domain import logger, sales
from sales.invoice.invoice import Invoice


@sales.command(part_of="Invoice")
class SetInvoicePaid:
    """Mark an invoice paid or unpaid. No state machine applies."""

    invoice_id = Identifier(required=True)
    paid = Boolean(default=False)


@sales.command_handler(part_of=Invoice)
class SetInvoicePaidHandler:
    @handle(SetInvoicePaid)
    def set_paid(self, command):
        repo = current_domain.repository_for(Invoice)
        invoice = repo.get(command.invoice_id)
        if invoice.set_paid(command.paid):
            repo.add(invoice)
            logger.info(
                "Invoice paid flag changed",
                invoice_id=str(invoice.id),
                is_paid=invoice.is_paid,
            )
        return invoice.is_paid
