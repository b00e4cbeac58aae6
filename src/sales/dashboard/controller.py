"""Dashboard controller — transaction scripts over the Order and Invoice stores.

Every command goes through ``current_domain.process`` and every read
recomputes the revenue snapshot from the stores; nothing is cached between
calls. One process-wide lock serializes commands and snapshot reads across
both stores, which keeps the check-then-add in invoice creation race-free and
gives every snapshot a consistent view.

The controller must run inside an active domain context (the API middleware
or test fixtures push one).
"""

import threading
from collections.abc import Callable
from datetime import date

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from sales.dashboard.read_model import DashboardAction, DashboardView
from sales.domain import logger
from sales.invoice.creation import CreateInvoice
from sales.invoice.invoice import Invoice
from sales.invoice.payment import SetInvoicePaid
from sales.order.order import Order, OrderStatus
from sales.order.placement import PlaceOrder
from sales.order.status import ChangeOrderStatus, MarkOrderComplete
from sales.reconciliation.baseline import RevenueBaseline
from sales.reconciliation.engine import RevenueSnapshot, compute_snapshot
from sales.reconciliation.window import WindowKind, WindowSpec, today_utc

# Guards both stores. Re-entrant so reads can run inside a command script.
_store_lock = threading.RLock()


def describe_error(exc: Exception) -> str:
    """First human-readable message carried by a domain exception."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
    return str(exc)


class DashboardController:
    """Seller dashboard: commands, active window, derived read model."""

    def __init__(
        self,
        window: WindowSpec | None = None,
        today: Callable[[], date] | None = None,
        baseline: RevenueBaseline | None = None,
    ):
        self._window = window or WindowSpec(kind=WindowKind.WEEK)
        self._today = today or today_utc
        self._baseline = baseline

    @property
    def window(self) -> WindowSpec:
        return self._window

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def list_orders(self) -> list[Order]:
        with _store_lock:
            return current_domain.repository_for(Order).list_all()

    def list_invoices(self) -> list[Invoice]:
        with _store_lock:
            return current_domain.repository_for(Invoice).list_all()

    def get_order(self, order_id: str) -> Order:
        with _store_lock:
            return current_domain.repository_for(Order).get(order_id)

    def get_invoice(self, invoice_id: str) -> Invoice:
        with _store_lock:
            return current_domain.repository_for(Invoice).get(invoice_id)

    def find_invoice_for_order(self, order_id: str) -> Invoice | None:
        with _store_lock:
            return current_domain.repository_for(Invoice).find_by_order(order_id)

    def invoiceable_orders(self) -> list[Order]:
        """Completed orders that have no invoice yet."""
        with _store_lock:
            invoiced = {str(invoice.order_id) for invoice in self.list_invoices()}
            return [
                order
                for order in self.list_orders()
                if order.status == OrderStatus.COMPLETED.value and str(order.id) not in invoiced
            ]

    def get_snapshot(self, window_spec=None) -> RevenueSnapshot:
        """Snapshot for ``window_spec`` (a WindowSpec or a ``{kind, start, end}`` dict),
        or for the active window when omitted."""
        spec = self._coerce_spec(window_spec) if window_spec is not None else self._window
        window = spec.resolve(self._today())
        with _store_lock:
            orders = self.list_orders()
            invoices = self.list_invoices()
        return compute_snapshot(orders, invoices, window, baseline=self._baseline)

    def view(self) -> DashboardView:
        with _store_lock:
            orders = self.list_orders()
            invoices = self.list_invoices()
        invoiced = {str(invoice.order_id) for invoice in invoices}
        snapshot = compute_snapshot(
            orders,
            invoices,
            self._window.resolve(self._today()),
            baseline=self._baseline,
        )
        return DashboardView(
            window_spec=self._window,
            snapshot=snapshot,
            orders=orders,
            invoices=invoices,
            invoiceable_orders=[
                order
                for order in orders
                if order.status == OrderStatus.COMPLETED.value and str(order.id) not in invoiced
            ],
        )

    # -------------------------------------------------------------------
    # Commands (raise typed errors)
    # -------------------------------------------------------------------
    def record_new_order(self, customer_name: str, total: float, placed_on, status=OrderStatus.PENDING) -> str:
        """Entry point for the external checkout flow."""
        if isinstance(placed_on, date):
            placed_on = placed_on.isoformat()
        if isinstance(status, OrderStatus):
            status = status.value
        command = PlaceOrder(
            customer_name=customer_name,
            total=total,
            placed_on=placed_on,
            status=status,
        )
        with _store_lock:
            return current_domain.process(command, asynchronous=False)

    def set_status(self, order_id: str, status) -> str:
        """Administrative status override. Raises InvalidTransition."""
        if isinstance(status, OrderStatus):
            status = status.value
        with _store_lock:
            return current_domain.process(
                ChangeOrderStatus(order_id=order_id, status=status),
                asynchronous=False,
            )

    def create_invoice(self, order_id: str, description_template: str | None = None) -> str:
        """Raises OrderNotFound, OrderNotCompleted or DuplicateInvoice."""
        with _store_lock:
            return current_domain.process(
                CreateInvoice(order_id=order_id, description_template=description_template),
                asynchronous=False,
            )

    def set_invoice_paid(self, invoice_id: str, paid: bool) -> bool:
        with _store_lock:
            return current_domain.process(
                SetInvoicePaid(invoice_id=invoice_id, paid=paid),
                asynchronous=False,
            )

    # -------------------------------------------------------------------
    # Dashboard actions (rejections reported, not raised)
    # -------------------------------------------------------------------
    def mark_order_complete(self, order_id: str) -> DashboardAction:
        """Complete the order; already-terminal orders are left untouched."""
        return self._run_action(
            "mark_order_complete",
            order_id,
            lambda: current_domain.process(MarkOrderComplete(order_id=order_id), asynchronous=False),
            lambda status: f"Order is {status}",
        )

    def create_invoice_for_order(self, order_id: str) -> DashboardAction:
        return self._run_action(
            "create_invoice",
            order_id,
            lambda: self.create_invoice(order_id),
            lambda invoice_id: f"Invoice {self.get_invoice(invoice_id).invoice_number} created",
            result_is_reference=True,
        )

    def toggle_paid(self, invoice_id: str) -> DashboardAction:
        def _toggle():
            invoice = self.get_invoice(invoice_id)
            return self.set_invoice_paid(invoice_id, not invoice.is_paid)

        return self._run_action(
            "toggle_paid",
            invoice_id,
            _toggle,
            lambda paid: "Invoice marked as paid" if paid else "Invoice marked as unpaid",
        )

    def change_window(self, kind, start=None, end=None) -> RevenueSnapshot:
        """Switch the active window. Raises InvalidWindow and keeps the old one."""
        spec = WindowSpec.build(kind, start, end)
        self._window = spec
        logger.info(
            "Dashboard window changed",
            kind=spec.kind.value,
            start=spec.start.isoformat() if spec.start else None,
            end=spec.end.isoformat() if spec.end else None,
        )
        return self.get_snapshot()

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _run_action(self, action, reference, operation, describe, result_is_reference=False) -> DashboardAction:
        with _store_lock:
            try:
                result = operation()
            except (ValidationError, ObjectNotFoundError) as exc:
                message = describe_error(exc)
                logger.warning(
                    "Dashboard action rejected",
                    action=action,
                    reference=reference,
                    error=message,
                )
                return DashboardAction(
                    accepted=False,
                    message=message,
                    reference=reference,
                    snapshot=self.get_snapshot(),
                )
            return DashboardAction(
                accepted=True,
                message=describe(result),
                reference=result if result_is_reference else reference,
                snapshot=self.get_snapshot(),
            )

    @staticmethod
    def _coerce_spec(window_spec) -> WindowSpec:
        if isinstance(window_spec, WindowSpec):
            return window_spec
        if isinstance(window_spec, dict):
            return WindowSpec.build(
                window_spec.get("kind", WindowKind.WEEK.value),
                window_spec.get("start"),
                window_spec.get("end"),
            )
        return WindowSpec.build(window_spec)
