"""OrderFlow FastAPI application.

Web server for order intake and lookup. Each request runs inside the Orders
domain context and is handled synchronously: validate, persist, then the
best-effort invoice upload and notification.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from orders/domain.toml:
#   - "test"/"development" → in-memory provider
#   - "production"         → PostgreSQL
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from orders.api import (
    domain_context_middleware,
    health_router,
    install_collaborators,
    order_router,
    register_error_handlers,
    request_context_middleware,
)
from orders.channel.notify_port import OrderNotificationPort
from orders.channel.upload_port import InvoiceUploadPort
from orders.domain import orders

orders.init()


def create_app(
    uploader: InvoiceUploadPort | None = None,
    notifier: OrderNotificationPort | None = None,
) -> FastAPI:
    """Assemble the API with its collaborators, middleware and error handlers."""
    application = FastAPI(
        title="OrderFlow API",
        description="Order intake with invoice storage and order notifications",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.middleware("http")(domain_context_middleware)
    # Outermost: registered last
    application.middleware("http")(request_context_middleware)

    install_collaborators(application, uploader=uploader, notifier=notifier)
    register_error_handlers(application)

    application.include_router(order_router)
    application.include_router(health_router)
    return application


app = create_app()
