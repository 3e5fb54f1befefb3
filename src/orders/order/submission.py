"""Order submission: validate, persist, upload invoice, notify.

The steps run in sequence inside one request:

1. Validate the payload. Failure raises ``ValidationError``; nothing is stored.
2. Persist through the order store. ``StorageError`` propagates and the
   request is abandoned.
3. Upload the invoice, only when one was supplied.
4. Publish the order-created notification.

Steps 3 and 4 are best-effort. Their results are inspected, a failure is logged
as a ``CollaboratorError`` and then discarded: the order stays created, nothing
is retried and nothing is rolled back. The invoice URL is returned to the caller
but not written back to the stored order.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime

import structlog

from orders.channel.notify_port import NotifyResult, OrderNotificationPort, OrderSummary
from orders.channel.upload_port import InvoiceFile, InvoiceUploadPort, UploadResult
from orders.errors import CollaboratorError, UploadAcceptanceError, ValidationError
from orders.order.order import Order, utc_now
from orders.order.store import OrderStore
from orders.order.validation import validate_order

logger = structlog.get_logger(__name__)

INVOICE_CONTENT_TYPE = "application/pdf"
MAX_INVOICE_BYTES = 10 * 1024 * 1024


def check_invoice_part(content_type: str | None, size: int | None) -> None:
    """Reject an invoice part by its declared type and size, before its body is read.

    ``size`` may be unknown (``None``); the body is then checked once read.
    """
    if content_type != INVOICE_CONTENT_TYPE:
        raise UploadAcceptanceError("Only PDF files are allowed")
    if size is not None and size > MAX_INVOICE_BYTES:
        raise UploadAcceptanceError("File too large")


def accept_invoice_file(filename: str, content_type: str | None, content: bytes) -> InvoiceFile:
    """Admit an invoice upload at intake, or raise ``UploadAcceptanceError``."""
    check_invoice_part(content_type, len(content))
    return InvoiceFile(filename=filename, content_type=content_type, content=content)


@dataclass(frozen=True)
class SubmissionOutcome:
    """A created order plus what happened to its side effects."""

    order: Order
    invoice_file_url: str | None
    upload: UploadResult | None
    notification: NotifyResult


class OrderSubmission:
    """Runs one order-creation request through the pipeline."""

    def __init__(
        self,
        store: OrderStore,
        uploader: InvoiceUploadPort,
        notifier: OrderNotificationPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store
        self.uploader = uploader
        self.notifier = notifier
        self._clock = clock

    def submit(self, payload: Mapping, invoice: InvoiceFile | None = None) -> SubmissionOutcome:
        result = validate_order(payload)
        if not result.success:
            logger.info("Order rejected", errors=[error.to_dict() for error in result.errors])
            raise ValidationError(result.errors)

        order = self.store.create_order(result.draft)

        upload = None
        invoice_file_url = None
        if invoice is not None:
            upload = self._upload_invoice(order, invoice)
            if upload.success:
                invoice_file_url = upload.url

        notification = self._notify(order, invoice_file_url)

        return SubmissionOutcome(
            order=order,
            invoice_file_url=invoice_file_url,
            upload=upload,
            notification=notification,
        )

    def _upload_invoice(self, order: Order, invoice: InvoiceFile) -> UploadResult:
        try:
            result = self.uploader.upload(invoice, order.order_id)
        except Exception as exc:
            result = UploadResult(success=False, failure_reason=str(exc))

        if result.success:
            logger.info("Invoice uploaded", order_id=order.order_id, url=result.url)
        else:
            error = CollaboratorError("invoice upload", result.failure_reason or "unknown error")
            logger.error("Invoice upload failed", order_id=order.order_id, error=str(error))
        return result

    def _notify(self, order: Order, invoice_file_url: str | None) -> NotifyResult:
        summary = OrderSummary(
            order_id=order.order_id,
            customer_name=order.customer_name,
            order_amount=order.formatted_amount,
            invoice_file_url=invoice_file_url,
            timestamp=self._clock(),
        )
        try:
            result = self.notifier.publish_order_created(summary)
        except Exception as exc:
            result = NotifyResult(success=False, failure_reason=str(exc))

        if not result.success:
            error = CollaboratorError("order notification", result.failure_reason or "unknown error")
            logger.error("Order notification failed", order_id=order.order_id, error=str(error))
        return result
