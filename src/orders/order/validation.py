"""Order payload validation.

The accepted shape of an order-creation request is described explicitly in
``ORDER_SCHEMA``: one ``FieldSpec`` per field, naming the wire key, the parser
that coerces the raw value, and the constraint checks applied afterwards.

``validate_order`` walks the schema and never stops at the first problem: the
result lists every failing field. It touches neither storage nor the network.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from orders.order.order import quantize_amount

# numeric(10, 2) in the order store
MAX_ORDER_AMOUNT = Decimal("100000000")
AMOUNT_TOO_SMALL = "Order amount must be greater than 0"
AMOUNT_TOO_BIG = "Order amount must be less than 100000000"


@dataclass(frozen=True)
class FieldError:
    """A single failed check, reported against the wire name of the field."""

    field: str
    message: str
    code: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True)
class OrderDraft:
    """A validated order-creation request, ready to be persisted."""

    customer_name: str
    order_amount: Decimal
    order_date: date


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating an order payload."""

    success: bool
    draft: OrderDraft | None = None
    errors: tuple[FieldError, ...] = ()

    @classmethod
    def valid(cls, draft: OrderDraft) -> "ValidationResult":
        return cls(success=True, draft=draft)

    @classmethod
    def invalid(cls, errors) -> "ValidationResult":
        return cls(success=False, errors=tuple(errors))


class _Rejected(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class Check:
    """A constraint on a parsed value: ``predicate`` must hold or ``code``/``message`` is reported."""

    predicate: Callable[[object], bool]
    code: str
    message: str


@dataclass(frozen=True)
class FieldSpec:
    name: str
    wire_name: str
    parse: Callable[[object], object]
    checks: tuple[Check, ...] = field(default_factory=tuple)

    def raw_value(self, payload: Mapping):
        if self.wire_name in payload:
            return payload[self.wire_name]
        return payload.get(self.name)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------
def _parse_text(value) -> str:
    if value is None:
        raise _Rejected("required", "Required")
    if not isinstance(value, str):
        raise _Rejected("invalid_type", "Expected text")
    return value.strip()


def _parse_amount(value) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise _Rejected("required", "Required")
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        raise _Rejected("invalid_type", "Expected a number")
    try:
        amount = Decimal(value.strip()) if isinstance(value, str) else Decimal(str(value))
    except InvalidOperation:
        raise _Rejected("invalid_type", "Expected a number") from None
    if not amount.is_finite():
        raise _Rejected("invalid_type", "Expected a number")
    # Out-of-range raw values would overflow the quantize context.
    if amount <= 0:
        raise _Rejected("too_small", AMOUNT_TOO_SMALL)
    if amount >= MAX_ORDER_AMOUNT:
        raise _Rejected("too_big", AMOUNT_TOO_BIG)
    return quantize_amount(amount)


def _parse_date(value) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise _Rejected("required", "Required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise _Rejected("invalid_type", "Expected a date")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise _Rejected("invalid_date", "Invalid date") from None


ORDER_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec(
        name="customer_name",
        wire_name="customerName",
        parse=_parse_text,
        checks=(Check(lambda name: len(name) > 0, "too_small", "Customer name is required"),),
    ),
    FieldSpec(
        name="order_amount",
        wire_name="orderAmount",
        parse=_parse_amount,
        checks=(
            Check(lambda amount: amount > 0, "too_small", AMOUNT_TOO_SMALL),
            Check(lambda amount: amount < MAX_ORDER_AMOUNT, "too_big", AMOUNT_TOO_BIG),
        ),
    ),
    FieldSpec(
        name="order_date",
        wire_name="orderDate",
        parse=_parse_date,
    ),
)


def validate_order(payload: Mapping, schema: tuple[FieldSpec, ...] = ORDER_SCHEMA) -> ValidationResult:
    """Validate an order-creation payload against ``schema``."""
    values = {}
    errors: list[FieldError] = []

    for spec in schema:
        try:
            value = spec.parse(spec.raw_value(payload))
        except _Rejected as rejection:
            errors.append(FieldError(field=spec.wire_name, message=rejection.message, code=rejection.code))
            continue

        failed = next((check for check in spec.checks if not check.predicate(value)), None)
        if failed is not None:
            errors.append(FieldError(field=spec.wire_name, message=failed.message, code=failed.code))
            continue

        values[spec.name] = value

    if errors:
        return ValidationResult.invalid(errors)
    return ValidationResult.valid(OrderDraft(**values))
