"""Pydantic request/response schemas for the Sales API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class RecordOrderRequest(BaseModel):
    customer_name: str = Field(min_length=1, max_length=255)
    total: float = Field(ge=0)
    placed_on: str  # ISO date or "June 15, 2023"
    status: str = "Pending"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "John Doe",
                    "total": 120.00,
                    "placed_on": "2023-06-15",
                    "status": "Pending",
                }
            ]
        }
    }


class ChangeOrderStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Invoice Request Schemas
# ---------------------------------------------------------------------------
class CreateInvoiceRequest(BaseModel):
    order_id: str
    description_template: str | None = None


class SetInvoicePaidRequest(BaseModel):
    paid: bool


# ---------------------------------------------------------------------------
# Dashboard Request Schemas
# ---------------------------------------------------------------------------
class ChangeWindowRequest(BaseModel):
    kind: str = "week"
    start: str | None = None
    end: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class InvoiceIdResponse(BaseModel):
    invoice_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class PaidResponse(BaseModel):
    invoice_id: str
    is_paid: bool


class OrderResponse(BaseModel):
    order_id: str
    order_number: str
    customer_name: str
    placed_on: date
    status: str
    total: float

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            order_id=str(order.id),
            order_number=order.order_number,
            customer_name=order.customer_name,
            placed_on=order.placed_on,
            status=order.status,
            total=order.total,
        )


class InvoiceResponse(BaseModel):
    invoice_id: str
    invoice_number: str
    order_id: str
    customer_name: str
    description: str | None = None
    total: float
    issued_at: datetime
    is_paid: bool

    @classmethod
    def from_invoice(cls, invoice) -> "InvoiceResponse":
        return cls(
            invoice_id=str(invoice.id),
            invoice_number=invoice.invoice_number,
            order_id=str(invoice.order_id),
            customer_name=invoice.customer_name,
            description=invoice.description,
            total=invoice.total,
            issued_at=invoice.issued_at,
            is_paid=bool(invoice.is_paid),
        )


class WindowResponse(BaseModel):
    kind: str
    start: date
    end: date


class SnapshotResponse(BaseModel):
    window: WindowResponse
    recognized: float
    total_invoiced: float
    invoiced_unpaid: float
    unbilled: float
    change_percent: float
    order_count: int
    completed_count: int
    orders_by_status: dict[str, int]
    invoice_count: int
    paid_invoice_count: int

    @classmethod
    def from_snapshot(cls, snapshot) -> "SnapshotResponse":
        return cls(**snapshot.to_dict())


class DashboardActionResponse(BaseModel):
    accepted: bool
    message: str
    reference: str | None = None
    snapshot: SnapshotResponse | None = None

    @classmethod
    def from_action(cls, action) -> "DashboardActionResponse":
        return cls(
            accepted=action.accepted,
            message=action.message,
            reference=action.reference,
            snapshot=SnapshotResponse.from_snapshot(action.snapshot) if action.snapshot else None,
        )


class DashboardResponse(BaseModel):
    snapshot: SnapshotResponse
    orders: list[OrderResponse]
    invoices: list[InvoiceResponse]
    invoiceable_order_ids: list[str]
