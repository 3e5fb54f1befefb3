"""Pydantic response schemas for the Orders API.

These are external contracts: fields are exposed in camelCase, as the browser
UI expects, and amounts are fixed two-decimal strings.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from orders.order.order import Order


class OrderResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    order_id: str
    customer_name: str
    order_amount: str
    order_date: date
    invoice_file_url: str | None = None
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order, **overrides) -> "OrderResponse":
        values = {
            "id": str(order.id),
            "order_id": order.order_id,
            "customer_name": order.customer_name,
            "order_amount": order.formatted_amount,
            "order_date": order.order_date,
            "invoice_file_url": order.invoice_file_url,
            "created_at": order.created_at,
        }
        values.update(overrides)
        return cls(**values)


class OrderCreatedResponse(OrderResponse):
    message: str = "Order created successfully"

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "5f0c9a8e-2d43-4f4e-9f55-2b8f3f0d6c11",
                    "orderId": "ORD-04217",
                    "customerName": "Ada Lovelace",
                    "orderAmount": "19.90",
                    "orderDate": "2024-03-01",
                    "invoiceFileUrl": None,
                    "createdAt": "2024-03-01T10:15:00Z",
                    "message": "Order created successfully",
                }
            ]
        },
    )


class FieldErrorSchema(BaseModel):
    field: str
    message: str
    code: str


class ValidationErrorResponse(BaseModel):
    message: str = "Validation error"
    errors: list[FieldErrorSchema]


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    services: dict[str, str]
