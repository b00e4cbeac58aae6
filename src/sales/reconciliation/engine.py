"""Revenue reconciliation — derives the dashboard's revenue snapshot.

Pure functions over the current orders and invoices. Nothing is cached: the
snapshot is recomputed on every read so it always agrees with the stores.

Three money pools are reconciled for a window:

    recognized      paid invoices whose order is Completed (invoice date in window)
    invoiced_unpaid invoices in window that do not count as recognized
    unbilled        Completed orders in window that have no invoice at all

Invoice dates, not order dates, gate recognition: an invoice dated inside the
window is matched against the full order set, even when its order was placed
before the window opened.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from sales.order.order import OrderStatus
from sales.reconciliation.baseline import RevenueBaseline, get_baseline
from sales.reconciliation.window import TimeWindow, WindowSpec

_COMPLETED = OrderStatus.COMPLETED.value


@dataclass(frozen=True)
class RevenueSnapshot:
    """Point-in-time revenue figures for one window."""

    window: TimeWindow
    recognized: float = 0.0
    total_invoiced: float = 0.0
    unbilled: float = 0.0
    change_percent: float = 0.0
    order_count: int = 0
    orders_by_status: dict[str, int] = field(default_factory=dict)
    invoice_count: int = 0
    paid_invoice_count: int = 0

    @property
    def invoiced_unpaid(self) -> float:
        return round(self.total_invoiced - self.recognized, 2)

    @property
    def completed_count(self) -> int:
        return self.orders_by_status.get(_COMPLETED, 0)

    def to_dict(self) -> dict:
        return {
            "window": {
                "kind": self.window.kind.value,
                "start": self.window.start.isoformat(),
                "end": self.window.end.isoformat(),
            },
            "recognized": self.recognized,
            "total_invoiced": self.total_invoiced,
            "invoiced_unpaid": self.invoiced_unpaid,
            "unbilled": self.unbilled,
            "change_percent": self.change_percent,
            "order_count": self.order_count,
            "completed_count": self.completed_count,
            "orders_by_status": dict(self.orders_by_status),
            "invoice_count": self.invoice_count,
            "paid_invoice_count": self.paid_invoice_count,
        }


def _is_recognized(invoice, orders_by_id) -> bool:
    if not invoice.is_paid:
        return False
    order = orders_by_id.get(str(invoice.order_id))
    return order is not None and order.status == _COMPLETED


def recognized_revenue(orders_by_id: dict, invoices: Iterable, window: TimeWindow) -> float:
    """Sum of paid invoices dated in ``window`` whose order is Completed."""
    return round(
        sum(
            invoice.total or 0.0
            for invoice in invoices
            if window.contains(invoice.issued_at) and _is_recognized(invoice, orders_by_id)
        ),
        2,
    )


def change_percent(current: float, previous: float) -> float:
    """Percentage change from ``previous`` to ``current``, 0 when there is no baseline."""
    if not previous:
        return 0.0
    return round((current - previous) / previous * 100, 1)


def compute_snapshot(
    orders: Iterable,
    invoices: Iterable,
    window: TimeWindow | WindowSpec,
    today: date | None = None,
    baseline: RevenueBaseline | None = None,
) -> RevenueSnapshot:
    """Compute the revenue snapshot for ``window``.

    Args:
        orders: Every known order (not pre-filtered by date).
        invoices: Every known invoice.
        window: A resolved ``TimeWindow`` or a ``WindowSpec`` to resolve
            against ``today``.
        today: Calendar day rolling windows are anchored on. Defaults to the
            current UTC date.
        baseline: Previous-period strategy. Defaults to ``get_baseline()``.
    """
    if isinstance(window, WindowSpec):
        window = window.resolve(today)

    orders = list(orders)
    invoices = list(invoices)
    orders_by_id = {str(order.id): order for order in orders}

    recognized = 0.0
    total_invoiced = 0.0
    invoice_count = 0
    paid_invoice_count = 0
    for invoice in invoices:
        if not window.contains(invoice.issued_at):
            continue
        invoice_count += 1
        total_invoiced += invoice.total or 0.0
        if invoice.is_paid:
            paid_invoice_count += 1
        if _is_recognized(invoice, orders_by_id):
            recognized += invoice.total or 0.0

    invoiced_order_ids = {str(invoice.order_id) for invoice in invoices}
    orders_by_status = {status.value: 0 for status in OrderStatus}
    order_count = 0
    unbilled = 0.0
    for order in orders:
        if not window.contains(order.placed_on):
            continue
        order_count += 1
        orders_by_status[order.status] = orders_by_status.get(order.status, 0) + 1
        if order.status == _COMPLETED and str(order.id) not in invoiced_order_ids:
            unbilled += order.total or 0.0

    recognized = round(recognized, 2)
    baseline = baseline or get_baseline()
    previous = baseline.previous(
        recognized,
        window,
        lambda other: recognized_revenue(orders_by_id, invoices, other),
    )

    return RevenueSnapshot(
        window=window,
        recognized=recognized,
        total_invoiced=round(total_invoiced, 2),
        unbilled=round(unbilled, 2),
        change_percent=change_percent(recognized, previous),
        order_count=order_count,
        orders_by_status=orders_by_status,
        invoice_count=invoice_count,
        paid_invoice_count=paid_invoice_count,
    )
