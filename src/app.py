"""SellerDesk Sales FastAPI application.

Web server for the seller dashboard: order intake from checkout, invoicing
and revenue snapshots. Commands are processed synchronously per request
inside the Sales domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from sales.domain import sales  # noqa: E402
from sales.utils.logging import add_context, clear_context

sales.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="SellerDesk Sales API",
    description="Seller dashboard — orders, invoices and revenue reconciliation",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Sales domain context for every request."""
    add_context(method=request.method, path=request.url.path)
    try:
        with sales.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from sales.api import dashboard_router, invoice_router, order_router  # noqa: E402

app.include_router(order_router)
app.include_router(invoice_router)
app.include_router(dashboard_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "sales": {"name": sales.name},
            },
        }
    )
