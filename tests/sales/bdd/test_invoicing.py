"""BDD tests for invoicing and revenue recognition."""

from pytest_bdd import given, parsers, scenarios, then, when
from sales.dashboard.controller import DashboardController
from sales.reconciliation.dates import coerce_date

scenarios("features/invoicing.feature")


@when("the order is marked complete from the dashboard")
def mark_complete(controller, ledger):
    ledger["action"] = controller.mark_order_complete(ledger["order_id"])
    assert ledger["action"].accepted


@given("an invoice is created for the order")
@when("an invoice is created for the order")
def create_invoice(controller, ledger):
    ledger["invoice_id"] = controller.create_invoice(ledger["order_id"])


@when("another invoice is requested for the order")
def request_invoice(controller, ledger):
    ledger["action"] = controller.create_invoice_for_order(ledger["order_id"])


@when("the invoice paid flag is toggled")
def toggle_paid(controller, ledger):
    ledger["action"] = controller.toggle_paid(ledger["invoice_id"])


@then("the invoice is paid")
def invoice_is_paid(controller, ledger):
    assert controller.get_invoice(ledger["invoice_id"]).is_paid is True


@then(parsers.cfparse("the day snapshot for the invoice date recognizes {amount:f}"))
def day_snapshot_recognizes(controller, ledger, amount):
    issued_day = coerce_date(controller.get_invoice(ledger["invoice_id"]).issued_at)
    snapshot = DashboardController(today=lambda: issued_day).get_snapshot({"kind": "day"})
    assert snapshot.recognized == round(amount, 2)


@then(parsers.cfparse("the order has {count:d} invoice"))
@then(parsers.cfparse("the order has {count:d} invoices"))
def order_invoice_count(controller, ledger, count):
    invoices = [invoice for invoice in controller.list_invoices() if str(invoice.order_id) == ledger["order_id"]]
    assert len(invoices) == count


@then(parsers.cfparse("the week snapshot shows {unbilled:f} unbilled and {recognized:f} recognized"))
def week_snapshot(controller, unbilled, recognized):
    snapshot = controller.get_snapshot({"kind": "week"})
    assert snapshot.unbilled == round(unbilled, 2)
    assert snapshot.recognized == round(recognized, 2)
