"""FastAPI routes for the Sales domain — orders, invoices and the seller dashboard."""

from fastapi import APIRouter

from sales.api.schemas import (
    ChangeOrderStatusRequest,
    ChangeWindowRequest,
    CreateInvoiceRequest,
    DashboardActionResponse,
    DashboardResponse,
    InvoiceIdResponse,
    InvoiceResponse,
    OrderIdResponse,
    OrderResponse,
    PaidResponse,
    RecordOrderRequest,
    SetInvoicePaidRequest,
    SnapshotResponse,
    StatusResponse,
)
from sales.dashboard import get_controller

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def record_order(body: RecordOrderRequest) -> OrderIdResponse:
    """Record a new order placed through checkout."""
    order_id = get_controller().record_new_order(
        customer_name=body.customer_name,
        total=body.total,
        placed_on=body.placed_on,
        status=body.status,
    )
    return OrderIdResponse(order_id=order_id)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in get_controller().list_orders()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return OrderResponse.from_order(get_controller().get_order(order_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def change_order_status(order_id: str, body: ChangeOrderStatusRequest) -> StatusResponse:
    """Administrative status override; illegal transitions return 400."""
    status = get_controller().set_status(order_id, body.status)
    return StatusResponse(status=status)


@order_router.put("/{order_id}/complete", response_model=DashboardActionResponse)
async def mark_order_complete(order_id: str) -> DashboardActionResponse:
    return DashboardActionResponse.from_action(get_controller().mark_order_complete(order_id))


# ---------------------------------------------------------------------------
# Invoice Router
# ---------------------------------------------------------------------------
invoice_router = APIRouter(prefix="/invoices", tags=["invoices"])


@invoice_router.post("", status_code=201, response_model=InvoiceIdResponse)
async def create_invoice(body: CreateInvoiceRequest) -> InvoiceIdResponse:
    """Issue an invoice for a completed, uninvoiced order."""
    invoice_id = get_controller().create_invoice(
        body.order_id,
        description_template=body.description_template,
    )
    return InvoiceIdResponse(invoice_id=invoice_id)


@invoice_router.get("", response_model=list[InvoiceResponse])
async def list_invoices() -> list[InvoiceResponse]:
    return [InvoiceResponse.from_invoice(invoice) for invoice in get_controller().list_invoices()]


@invoice_router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(invoice_id: str) -> InvoiceResponse:
    return InvoiceResponse.from_invoice(get_controller().get_invoice(invoice_id))


@invoice_router.put("/{invoice_id}/paid", response_model=PaidResponse)
async def set_invoice_paid(invoice_id: str, body: SetInvoicePaidRequest) -> PaidResponse:
    is_paid = get_controller().set_invoice_paid(invoice_id, body.paid)
    return PaidResponse(invoice_id=invoice_id, is_paid=is_paid)


@invoice_router.put("/{invoice_id}/toggle-paid", response_model=DashboardActionResponse)
async def toggle_invoice_paid(invoice_id: str) -> DashboardActionResponse:
    return DashboardActionResponse.from_action(get_controller().toggle_paid(invoice_id))


# ---------------------------------------------------------------------------
# Dashboard Router
# ---------------------------------------------------------------------------
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("", response_model=DashboardResponse)
async def get_dashboard() -> DashboardResponse:
    view = get_controller().view()
    return DashboardResponse(
        snapshot=SnapshotResponse.from_snapshot(view.snapshot),
        orders=[OrderResponse.from_order(order) for order in view.orders],
        invoices=[InvoiceResponse.from_invoice(invoice) for invoice in view.invoices],
        invoiceable_order_ids=[str(order.id) for order in view.invoiceable_orders],
    )


@dashboard_router.get("/snapshot", response_model=SnapshotResponse)
async def get_snapshot(kind: str | None = None, start: str | None = None, end: str | None = None) -> SnapshotResponse:
    """Snapshot for the given window, or for the active window when ``kind`` is omitted."""
    window_spec = {"kind": kind, "start": start, "end": end} if kind else None
    return SnapshotResponse.from_snapshot(get_controller().get_snapshot(window_spec))


@dashboard_router.put("/window", response_model=SnapshotResponse)
async def change_window(body: ChangeWindowRequest) -> SnapshotResponse:
    snapshot = get_controller().change_window(body.kind, body.start, body.end)
    return SnapshotResponse.from_snapshot(snapshot)


@dashboard_router.post("/orders/{order_id}/invoice", response_model=DashboardActionResponse)
async def create_invoice_for_order(order_id: str) -> DashboardActionResponse:
    """Dashboard "create invoice" action; rejections come back with ``accepted=false``."""
    return DashboardActionResponse.from_action(get_controller().create_invoice_for_order(order_id))
