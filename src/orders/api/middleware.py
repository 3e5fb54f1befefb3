"""HTTP middleware for the Orders API."""

from uuid import uuid4

from fastapi import Request

from orders.domain import orders
from orders.utils.logging import bind_request_context, clear_request_context


async def domain_context_middleware(request: Request, call_next):
    """Push the Orders domain context for each request."""
    with orders.domain_context():
        response = await call_next(request)
    return response


async def request_context_middleware(request: Request, call_next):
    """Bind request identifiers to every log line emitted while serving the request."""
    request_id = request.headers.get("x-request-id") or uuid4().hex
    bind_request_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_request_context()
    response.headers["x-request-id"] = request_id
    return response
