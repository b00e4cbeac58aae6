"""Tests for Invoice aggregate creation and the paid flag."""

from datetime import date

from sales.invoice.events import InvoiceCreated, InvoicePaid, InvoiceUnpaid
from sales.invoice.invoice import Invoice
from sales.order.order import Order


def _completed_order(total=120.00):
    return Order.create(
        customer_name="John Doe",
        total=total,
        placed_on=date(2023, 6, 15),
        status="Completed",
    )


def _make_invoice(**overrides):
    order = overrides.pop("order", None) or _completed_order()
    return Invoice.create(order, **overrides)


class TestInvoiceCreation:
    def test_create_copies_order_fields(self):
        order = _completed_order(total=75.25)
        invoice = Invoice.create(order)
        assert str(invoice.order_id) == str(order.id)
        assert invoice.customer_name == "John Doe"
        assert invoice.total == 75.25

    def test_create_starts_unpaid(self):
        invoice = _make_invoice()
        assert invoice.is_paid is False
        assert invoice.paid_at is None

    def test_create_stamps_issue_time(self):
        invoice = _make_invoice()
        assert invoice.issued_at is not None

    def test_create_generates_invoice_number(self):
        invoice = _make_invoice()
        assert invoice.invoice_number.startswith("INV-")

    def test_default_description_names_the_order(self):
        order = _completed_order()
        invoice = Invoice.create(order)
        assert invoice.description == f"Services for order {order.order_number}"

    def test_description_template(self):
        order = _completed_order()
        invoice = Invoice.create(order, description_template="Custom suit tailoring ({order})")
        assert invoice.description == f"Custom suit tailoring ({order.order_number})"

    def test_create_raises_event(self):
        invoice = _make_invoice()
        assert len(invoice._events) == 1
        assert isinstance(invoice._events[0], InvoiceCreated)


class TestInvoicePaidFlag:
    def test_mark_paid(self):
        invoice = _make_invoice()
        invoice._events.clear()
        assert invoice.set_paid(True) is True
        assert invoice.is_paid is True
        assert invoice.paid_at is not None
        assert isinstance(invoice._events[0], InvoicePaid)

    def test_mark_unpaid_after_paid(self):
        invoice = _make_invoice()
        invoice.set_paid(True)
        invoice._events.clear()
        assert invoice.set_paid(False) is True
        assert invoice.is_paid is False
        assert invoice.paid_at is None
        assert isinstance(invoice._events[0], InvoiceUnpaid)

    def test_setting_same_value_is_noop(self):
        invoice = _make_invoice()
        invoice._events.clear()
        assert invoice.set_paid(False) is False
        assert invoice._events == []
