"""Repository for the Order aggregate."""

from sales.domain import sales
from sales.order.order import Order
from sales.utils.queries import fetch_all


@sales.repository(part_of=Order)
class OrderRepository:
    """Order Store queries beyond the base get/add."""

    def list_all(self) -> list[Order]:
        """All orders in the order they were placed."""
        return sorted(fetch_all(self._dao.query), key=lambda order: order.created_at)

    def find_by_status(self, status: str) -> list[Order]:
        return sorted(fetch_all(self._dao.query.filter(status=status)), key=lambda order: order.created_at)
