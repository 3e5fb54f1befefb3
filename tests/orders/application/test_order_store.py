"""Tests for the order store (create and lookups)."""

from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from orders.errors import StorageError
from orders.order.order import ORDER_ID_PATTERN, Order
from orders.order.store import OrderStore, draw_order_number
from orders.order.validation import OrderDraft


def _draft(**overrides):
    defaults = {
        "customer_name": "Ada Lovelace",
        "order_amount": Decimal("19.90"),
        "order_date": date(2024, 3, 1),
    }
    defaults.update(overrides)
    return OrderDraft(**defaults)


class _Ticking:
    """Clock that advances one second per reading."""

    def __init__(self, start):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(seconds=1)
        return value


class _BrokenRepository:
    def add(self, order):
        raise ConnectionError("database is unreachable")

    def get(self, identifier):
        raise ConnectionError("database is unreachable")

    def find_by_order_id(self, order_id):
        raise ConnectionError("database is unreachable")

    def newest_first(self):
        raise ConnectionError("database is unreachable")


class _UnreachableStore(OrderStore):
    @property
    def repository(self):
        return _BrokenRepository()


class TestOrderNumbers:
    def test_default_numbers_stay_in_range(self):
        assert all(0 <= draw_order_number() <= 99999 for _ in range(200))


class TestCreateOrder:
    def test_returns_persisted_order(self, store):
        order = store.create_order(_draft())
        assert store.get_order(str(order.id)).order_id == order.order_id

    def test_order_id_format(self, store):
        order = store.create_order(_draft())
        assert ORDER_ID_PATTERN.match(order.order_id)

    def test_order_id_drawn_from_number_source(self):
        store = OrderStore(order_number=lambda: 4217)
        assert store.create_order(_draft()).order_id == "ORD-04217"

    def test_created_at_from_clock(self):
        stamp = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)
        store = OrderStore(order_number=lambda: 1, clock=lambda: stamp)
        assert store.create_order(_draft()).created_at == stamp

    def test_created_at_read_after_order_is_built(self, monkeypatch):
        readings = []

        def clock():
            readings.append(datetime(2024, 3, 1, 9, 30, tzinfo=UTC))
            return readings[-1]

        build = Order.create
        readings_at_build = []

        def create(**kwargs):
            readings_at_build.append(len(readings))
            return build(**kwargs)

        monkeypatch.setattr(Order, "create", create)
        order = OrderStore(order_number=lambda: 1, clock=clock).create_order(_draft())

        assert readings_at_build == [0]
        assert len(readings) == 1
        assert order.created_at == readings[0]

    def test_amount_stored_with_two_decimals(self, store):
        order = store.create_order(_draft(order_amount=Decimal("19.9")))
        reloaded = store.get_order(str(order.id))
        assert reloaded.formatted_amount == "19.90"

    def test_invoice_url_not_set(self, store):
        order = store.create_order(_draft())
        assert store.get_order(str(order.id)).invoice_file_url is None

    def test_order_id_collision_surfaces_as_storage_error(self):
        store = OrderStore(order_number=lambda: 7)
        first = store.create_order(_draft())

        with pytest.raises(StorageError):
            store.create_order(_draft(customer_name="Grace Hopper"))

        orders = store.get_all_orders()
        assert [order.id for order in orders] == [first.id]

    def test_unreachable_store_raises_storage_error(self):
        with pytest.raises(StorageError):
            _UnreachableStore().create_order(_draft())


class TestLookups:
    def test_get_order_by_system_id(self, store):
        order = store.create_order(_draft())
        assert store.get_order(str(order.id)).customer_name == "Ada Lovelace"

    def test_get_order_unknown_uuid(self, store):
        assert store.get_order(str(uuid4())) is None

    def test_get_order_with_non_uuid_identifier(self, store):
        store.create_order(_draft())
        assert store.get_order("ORD-00001") is None

    def test_get_order_by_order_id(self, store):
        order = store.create_order(_draft())
        assert store.get_order_by_order_id(order.order_id).id == order.id

    def test_get_order_by_unknown_order_id(self, store):
        assert store.get_order_by_order_id("ORD-99999") is None

    def test_resolve_by_system_id(self, store):
        order = store.create_order(_draft())
        assert store.resolve(str(order.id)).id == order.id

    def test_resolve_by_order_id(self, store):
        order = store.create_order(_draft())
        assert store.resolve(order.order_id).id == order.id

    def test_resolve_unknown(self, store):
        assert store.resolve("ORD-55555") is None
        assert store.resolve(str(uuid4())) is None

    def test_lookups_on_unreachable_store_raise_storage_error(self):
        store = _UnreachableStore()
        with pytest.raises(StorageError):
            store.get_order(str(uuid4()))
        with pytest.raises(StorageError):
            store.get_order_by_order_id("ORD-00001")
        with pytest.raises(StorageError):
            store.get_all_orders()


class TestGetAllOrders:
    def test_empty(self, store):
        assert store.get_all_orders() == []

    def test_newest_first(self, order_numbers):
        store = OrderStore(
            order_number=lambda: next(order_numbers),
            clock=_Ticking(datetime(2024, 3, 1, tzinfo=UTC)),
        )
        first = store.create_order(_draft(customer_name="First"))
        second = store.create_order(_draft(customer_name="Second"))
        third = store.create_order(_draft(customer_name="Third"))

        assert [order.id for order in store.get_all_orders()] == [third.id, second.id, first.id]
