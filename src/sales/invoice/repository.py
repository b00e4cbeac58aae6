"""Repository for the Invoice aggregate."""

from sales.domain import sales
from sales.invoice.invoice import Invoice
from sales.utils.queries import fetch_all


@sales.repository(part_of=Invoice)
class InvoiceRepository:
    """Invoice Store queries beyond the base get/add."""

    def list_all(self) -> list[Invoice]:
        """All invoices in the order they were issued."""
        return sorted(fetch_all(self._dao.query), key=lambda invoice: invoice.created_at)

    def find_by_order(self, order_id: str) -> Invoice | None:
        """The invoice issued for ``order_id``, if any. There is at most one."""
        matches = self._dao.query.filter(order_id=str(order_id)).all().items
        return matches[0] if matches else None
