"""Order store: the only component that reads or writes Order records.

``order_id`` values are drawn from a 100,000-value space and are not checked
for uniqueness before the insert. The unique constraint on ``Order.order_id``
rejects a collision, which surfaces here as ``StorageError``.
"""

import random
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from orders.errors import StorageError
from orders.order.order import MAX_ORDER_NUMBER, Order, format_order_id, utc_now
from orders.order.repository import OrderRepository
from orders.order.validation import OrderDraft

logger = structlog.get_logger(__name__)


def draw_order_number() -> int:
    return random.randint(0, MAX_ORDER_NUMBER)


def _is_uuid(value: str) -> bool:
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


class OrderStore:
    """Create and retrieve orders against the domain's configured provider.

    Args:
        order_number: source of order numbers in ``[0, 99999]``.
        clock: source of ``created_at`` timestamps.
    """

    def __init__(
        self,
        order_number: Callable[[], int] = draw_order_number,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_number = order_number
        self._clock = clock

    @property
    def repository(self) -> OrderRepository:
        return current_domain.repository_for(Order)

    def create_order(self, draft: OrderDraft) -> Order:
        order = Order.create(
            order_id=format_order_id(self._order_number()),
            customer_name=draft.customer_name,
            order_amount=draft.order_amount,
            order_date=draft.order_date,
        )
        order.created_at = self._clock()
        try:
            self.repository.add(order)
        except Exception as exc:
            logger.error("Failed to persist order", order_id=order.order_id, error=str(exc))
            raise StorageError(f"Could not persist order {order.order_id}: {exc}") from exc

        logger.info("Order persisted", id=str(order.id), order_id=order.order_id)
        return order

    def get_order(self, identifier: str) -> Order | None:
        """Look up an order by its system identifier."""
        if not _is_uuid(identifier):
            return None
        try:
            return self.repository.get(identifier)
        except ObjectNotFoundError:
            return None
        except Exception as exc:
            logger.error("Failed to load order", id=identifier, error=str(exc))
            raise StorageError(f"Could not load order {identifier}: {exc}") from exc

    def get_order_by_order_id(self, order_id: str) -> Order | None:
        """Look up an order by its ``ORD-NNNNN`` identifier."""
        try:
            return self.repository.find_by_order_id(order_id)
        except Exception as exc:
            logger.error("Failed to load order", order_id=order_id, error=str(exc))
            raise StorageError(f"Could not load order {order_id}: {exc}") from exc

    def get_all_orders(self) -> list[Order]:
        try:
            return self.repository.newest_first()
        except Exception as exc:
            logger.error("Failed to list orders", error=str(exc))
            raise StorageError(f"Could not list orders: {exc}") from exc

    def resolve(self, identifier: str) -> Order | None:
        """Find an order by system identifier first, then by ``ORD-NNNNN``."""
        return self.get_order(identifier) or self.get_order_by_order_id(identifier)
