"""Request-scoped wiring for the Orders API.

Collaborators live on ``app.state``; every request gets its own
``OrderSubmission`` built around them. Tests swap collaborators by installing
fakes, or override ``get_store`` through ``app.dependency_overrides``.
"""

from fastapi import Depends, FastAPI, Request

from orders.channel import build_notifier, build_uploader
from orders.channel.notify_port import OrderNotificationPort
from orders.channel.upload_port import InvoiceUploadPort
from orders.order.store import OrderStore
from orders.order.submission import OrderSubmission


def install_collaborators(
    app: FastAPI,
    uploader: InvoiceUploadPort | None = None,
    notifier: OrderNotificationPort | None = None,
) -> None:
    """Attach the invoice storage and notifier adapters to ``app``."""
    app.state.uploader = uploader or build_uploader()
    app.state.notifier = notifier or build_notifier()


def get_store() -> OrderStore:
    return OrderStore()


def get_submission(request: Request, store: OrderStore = Depends(get_store)) -> OrderSubmission:
    return OrderSubmission(
        store=store,
        uploader=request.app.state.uploader,
        notifier=request.app.state.notifier,
    )
