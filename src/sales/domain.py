"""Sales bounded context — Seller Orders, Invoicing and Revenue Reconciliation.

Handles the seller-side order lifecycle (CQRS), invoice issuance against
completed orders, and the time-windowed revenue figures shown on the seller
dashboard.
"""

from protean.domain import Domain

from sales.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

sales = Domain(name="sales")
