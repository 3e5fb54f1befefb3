"""Orders domain API package."""

from orders.api.dependencies import install_collaborators
from orders.api.errors import register_error_handlers
from orders.api.middleware import domain_context_middleware, request_context_middleware
from orders.api.routes import health_router, order_router

__all__ = [
    "order_router",
    "health_router",
    "install_collaborators",
    "register_error_handlers",
    "domain_context_middleware",
    "request_context_middleware",
]
