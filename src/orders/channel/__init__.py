"""Collaborator adapters: invoice storage and order notifications.

Fake adapters are used by default; the adapter is chosen through environment
variables. Each call builds a new instance: the application owns the instances
it hands to the submission pipeline.
"""

import os

from orders.channel.notify_port import OrderNotificationPort
from orders.channel.upload_port import InvoiceUploadPort


def build_uploader() -> InvoiceUploadPort:
    """Return the configured invoice storage adapter.

    Uses FakeInvoiceStorage by default. Configure via the
    INVOICE_STORAGE_ADAPTER and INVOICE_BUCKET environment variables.
    """
    adapter = os.environ.get("INVOICE_STORAGE_ADAPTER", "fake")
    if adapter == "fake":
        from orders.channel.fake_upload import DEFAULT_BUCKET, FakeInvoiceStorage

        return FakeInvoiceStorage(bucket=os.environ.get("INVOICE_BUCKET", DEFAULT_BUCKET))
    raise ValueError(f"Unknown invoice storage adapter: {adapter}")


def build_notifier() -> OrderNotificationPort:
    """Return the configured order notification adapter.

    Uses FakeOrderNotifier by default. Configure via the
    ORDER_NOTIFIER_ADAPTER and ORDER_TOPIC_ARN environment variables.
    """
    adapter = os.environ.get("ORDER_NOTIFIER_ADAPTER", "fake")
    if adapter == "fake":
        from orders.channel.fake_notify import DEFAULT_TOPIC_ARN, FakeOrderNotifier

        return FakeOrderNotifier(topic_arn=os.environ.get("ORDER_TOPIC_ARN", DEFAULT_TOPIC_ARN))
    raise ValueError(f"Unknown order notifier adapter: {adapter}")
