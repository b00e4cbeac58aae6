"""Shared BDD fixtures and step definitions for the Sales domain."""

import pytest
from pytest_bdd import given, parsers, then
from sales.dashboard.controller import DashboardController
from sales.reconciliation.window import today_utc


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def controller():
    today = today_utc()
    return DashboardController(today=lambda: today)


@pytest.fixture()
def ledger():
    """Ids and action results collected while a scenario runs."""
    return {"order_id": None, "invoice_id": None, "action": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a recorded order for "{customer}" totaling {total:f}'))
def recorded_order(controller, ledger, customer, total):
    ledger["order_id"] = controller.record_new_order(
        customer_name=customer, total=total, placed_on=today_utc()
    )


@given(parsers.cfparse('a completed order for "{customer}" totaling {total:f}'))
def completed_order(controller, ledger, customer, total):
    ledger["order_id"] = controller.record_new_order(
        customer_name=customer, total=total, placed_on=today_utc(), status="Completed"
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the invoice action is rejected with "{fragment}"'))
def invoice_action_rejected(ledger, fragment):
    action = ledger["action"]
    assert action is not None and not action.accepted
    assert fragment in action.message
