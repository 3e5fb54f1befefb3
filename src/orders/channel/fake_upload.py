"""Fake invoice storage: an S3-style bucket held in memory.

Produces the same URL shape a real bucket would
(``https://<bucket>.s3.amazonaws.com/invoices/<orderId>_<uuid>.<ext>``)
without any network calls.
"""

from uuid import uuid4

import structlog

from orders.channel.upload_port import InvoiceFile, InvoiceUploadPort, UploadResult

logger = structlog.get_logger(__name__)

DEFAULT_BUCKET = "order-management-invoices"


class FakeInvoiceStorage(InvoiceUploadPort):
    """Invoice storage adapter that records uploads in memory for test assertions."""

    def __init__(self, bucket: str = DEFAULT_BUCKET):
        self.bucket = bucket
        self.uploads: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Invoice upload failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Invoice upload failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def upload(self, invoice: InvoiceFile, order_id: str) -> UploadResult:
        if not self.should_succeed:
            return UploadResult(success=False, failure_reason=self.failure_reason)

        key = f"invoices/{order_id}_{uuid4()}.{invoice.extension}"
        url = f"https://{self.bucket}.s3.amazonaws.com/{key}"
        self.uploads.append(
            {
                "order_id": order_id,
                "key": key,
                "url": url,
                "filename": invoice.filename,
                "content_type": invoice.content_type,
                "size": invoice.size,
            }
        )

        logger.info("[MOCK S3] Uploaded invoice", filename=invoice.filename, url=url)
        return UploadResult(success=True, url=url)

    def reset(self):
        """Clear recorded uploads (useful between tests)."""
        self.uploads.clear()
        self.should_succeed = True
        self.failure_reason = "Invoice upload failed"
