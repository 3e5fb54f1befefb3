"""Repository for the Order aggregate."""

from orders.domain import orders
from orders.order.order import Order


@orders.repository(part_of=Order)
class OrderRepository:
    """Order queries beyond the base ``add``/``get``."""

    def find_by_order_id(self, order_id: str) -> Order | None:
        """Find an Order by its human-facing ``ORD-NNNNN`` identifier."""
        return self._dao.query.filter(order_id=order_id).all().first

    def newest_first(self) -> list[Order]:
        """All Orders, most recently created first."""
        return self._dao.query.order_by("-created_at").all().items
