"""Read model handed to the presentation layer."""

from dataclasses import dataclass, field

from sales.reconciliation.engine import RevenueSnapshot
from sales.reconciliation.window import WindowSpec


@dataclass(frozen=True)
class DashboardAction:
    """Outcome of a dashboard action.

    Rejections (e.g. invoicing an order twice) are reported here with a
    user-facing message instead of being raised.
    """

    accepted: bool
    message: str
    reference: str | None = None
    snapshot: RevenueSnapshot | None = None


@dataclass(frozen=True)
class DashboardView:
    """Everything the seller dashboard renders for the active window."""

    window_spec: WindowSpec
    snapshot: RevenueSnapshot
    orders: list = field(default_factory=list)
    invoices: list = field(default_factory=list)
    invoiceable_orders: list = field(default_factory=list)
