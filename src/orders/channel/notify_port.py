"""Order notification port: abstract interface for order-created announcements."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrderSummary:
    """What subscribers learn about a newly created order."""

    order_id: str
    customer_name: str
    order_amount: str
    timestamp: datetime
    invoice_file_url: str | None = None

    def to_message(self) -> dict:
        return {
            "orderId": self.order_id,
            "customerName": self.customer_name,
            "orderAmount": self.order_amount,
            "invoiceFileUrl": self.invoice_file_url,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class NotifyResult:
    """Result of a publish attempt."""

    success: bool
    message_id: str | None = None
    failure_reason: str | None = None


class OrderNotificationPort(ABC):
    """Abstract interface for order notification adapters."""

    @abstractmethod
    def publish_order_created(self, summary: OrderSummary) -> NotifyResult:
        """Announce a newly created order. Fire-and-forget from the caller's view."""
        ...
