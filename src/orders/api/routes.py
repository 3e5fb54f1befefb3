"""FastAPI routes for the Orders domain."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from orders.api.dependencies import get_store, get_submission
from orders.api.schemas import (
    HealthResponse,
    MessageResponse,
    OrderCreatedResponse,
    OrderResponse,
    ValidationErrorResponse,
)
from orders.channel.upload_port import InvoiceFile
from orders.order.store import OrderStore
from orders.order.submission import (
    MAX_INVOICE_BYTES,
    OrderSubmission,
    accept_invoice_file,
    check_invoice_part,
)

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


async def _read_invoice(upload: UploadFile | None) -> InvoiceFile | None:
    """Turn the optional ``invoiceFile`` part into an accepted InvoiceFile.

    Oversized parts are rejected on their recorded size, and at most one byte
    past the limit is ever read into memory.
    """
    if upload is None or not upload.filename:
        return None
    check_invoice_part(upload.content_type, upload.size)
    content = await upload.read(MAX_INVOICE_BYTES + 1)
    return accept_invoice_file(upload.filename, upload.content_type, content)


@order_router.post(
    "",
    status_code=201,
    response_model=OrderCreatedResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": MessageResponse}},
)
async def create_order(
    customer_name: str | None = Form(default=None, alias="customerName"),
    order_amount: str | None = Form(default=None, alias="orderAmount"),
    order_date: str | None = Form(default=None, alias="orderDate"),
    invoice_file: UploadFile | None = File(default=None, alias="invoiceFile"),
    submission: OrderSubmission = Depends(get_submission),
) -> OrderCreatedResponse:
    """Create an order, optionally with a PDF invoice attached."""
    invoice = await _read_invoice(invoice_file)
    outcome = submission.submit(
        {
            "customerName": customer_name,
            "orderAmount": order_amount,
            "orderDate": order_date,
        },
        invoice=invoice,
    )
    return OrderCreatedResponse.from_order(outcome.order, invoice_file_url=outcome.invoice_file_url)


@order_router.get("/{identifier}", response_model=OrderResponse, responses={404: {"model": MessageResponse}})
async def get_order(identifier: str, store: OrderStore = Depends(get_store)):
    """Fetch an order by system identifier or by ``ORD-NNNNN``."""
    order = store.resolve(identifier)
    if order is None:
        return JSONResponse(status_code=404, content={"message": "Order not found"})
    return OrderResponse.from_order(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(store: OrderStore = Depends(get_store)) -> list[OrderResponse]:
    """All orders, newest first."""
    return [OrderResponse.from_order(order) for order in store.get_all_orders()]


# ---------------------------------------------------------------------------
# Health Router
# ---------------------------------------------------------------------------
health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        services={"database": "connected", "s3": "mock", "sns": "mock"},
    )
