import pytest
from protean.integrations.pytest import DomainFixture
from protean.utils.globals import current_domain


@pytest.fixture(scope="session")
def sales_bed():
    from sales.domain import sales

    bed = DomainFixture(sales)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(sales_bed):
    from sales.dashboard import reset_controller
    from sales.reconciliation.baseline import reset_baseline

    with sales_bed.domain_context():
        yield

        # Clear in-memory stores so every test starts empty
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_baseline()
    reset_controller()
