"""Sales domain API package."""

from sales.api.routes import dashboard_router, invoice_router, order_router

__all__ = ["order_router", "invoice_router", "dashboard_router"]
