"""Fake order notifier: an SNS-style topic that records published messages."""

from uuid import uuid4

import structlog

from orders.channel.notify_port import NotifyResult, OrderNotificationPort, OrderSummary

logger = structlog.get_logger(__name__)

DEFAULT_TOPIC_ARN = "arn:aws:sns:us-east-1:123456789:order-notifications"


class FakeOrderNotifier(OrderNotificationPort):
    """Notifier that records messages in memory for test assertions."""

    def __init__(self, topic_arn: str = DEFAULT_TOPIC_ARN):
        self.topic_arn = topic_arn
        self.published: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification publish failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification publish failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish_order_created(self, summary: OrderSummary) -> NotifyResult:
        if not self.should_succeed:
            return NotifyResult(success=False, failure_reason=self.failure_reason)

        message_id = f"sns-{uuid4().hex[:12]}"
        message = summary.to_message()
        self.published.append({"message_id": message_id, "topic_arn": self.topic_arn, "message": message})

        logger.info("[MOCK SNS] Published order notification", topic_arn=self.topic_arn, message=message)
        logger.info("[MOCK EMAIL] Order confirmation sent", customer_name=summary.customer_name)
        return NotifyResult(success=True, message_id=message_id)

    def reset(self):
        """Clear published messages (useful between tests)."""
        self.published.clear()
        self.should_succeed = True
        self.failure_reason = "Notification publish failed"
