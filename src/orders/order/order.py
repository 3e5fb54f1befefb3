"""Order aggregate: the persisted shape of an order.

Orders are written once by the submission pipeline and only read afterwards.
There is no update or delete path, so ``id``, ``order_id`` and ``created_at``
never change after the insert.
"""

import re
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, Float, String, Text

from orders.domain import orders

ORDER_ID_PREFIX = "ORD-"
ORDER_ID_PATTERN = re.compile(r"^ORD-\d{5}$")
MAX_ORDER_NUMBER = 99999

CENT = Decimal("0.01")


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_order_id(number: int) -> str:
    """Render an order number as the human-facing ``ORD-NNNNN`` identifier."""
    if not 0 <= number <= MAX_ORDER_NUMBER:
        raise ValueError(f"Order number out of range: {number}")
    return f"{ORDER_ID_PREFIX}{number:05d}"


def quantize_amount(value) -> Decimal:
    """Round an amount to two decimal places, half away from zero."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value) -> str:
    """Render a stored amount with exactly two decimal places (``19.9`` → ``"19.90"``)."""
    return str(quantize_amount(value))


@orders.aggregate
class Order:
    """Order aggregate root."""

    order_id: String(required=True, max_length=20, unique=True)
    customer_name: Text(required=True)
    order_amount: Float(required=True)
    order_date: Date(required=True)
    invoice_file_url: Text()
    created_at: DateTime(required=True, default=utc_now)

    @invariant.post
    def order_id_must_be_well_formed(self):
        if self.order_id and not ORDER_ID_PATTERN.match(self.order_id):
            raise ValidationError({"order_id": [f"Order ID must look like ORD-NNNNN, got '{self.order_id}'"]})

    @invariant.post
    def order_amount_must_be_positive(self):
        if self.order_amount is not None and self.order_amount <= 0:
            raise ValidationError({"order_amount": ["Order amount must be greater than 0"]})

    @classmethod
    def create(
        cls,
        order_id,
        customer_name,
        order_amount,
        order_date,
        created_at=None,
        invoice_file_url=None,
    ):
        """Build a new order from already-validated values.

        ``created_at`` defaults to the current UTC time.
        """
        values = {
            "order_id": order_id,
            "customer_name": customer_name,
            "order_amount": float(quantize_amount(order_amount)),
            "order_date": order_date,
            "invoice_file_url": invoice_file_url,
        }
        if created_at is not None:
            values["created_at"] = created_at
        return cls(**values)

    @property
    def formatted_amount(self) -> str:
        return format_amount(self.order_amount)
