from itertools import count

import pytest
from orders.channel.fake_notify import FakeOrderNotifier
from orders.channel.fake_upload import FakeInvoiceStorage
from orders.channel.upload_port import InvoiceFile
from orders.order.store import OrderStore
from orders.order.submission import OrderSubmission


@pytest.fixture()
def uploader():
    return FakeInvoiceStorage()


@pytest.fixture()
def notifier():
    return FakeOrderNotifier()


@pytest.fixture()
def order_numbers():
    """Sequential order numbers, so tests never hit a random collision."""
    return count(1)


@pytest.fixture()
def store(order_numbers):
    return OrderStore(order_number=lambda: next(order_numbers))


@pytest.fixture()
def submission(store, uploader, notifier):
    return OrderSubmission(store=store, uploader=uploader, notifier=notifier)


@pytest.fixture()
def invoice():
    return InvoiceFile(filename="invoice-0042.pdf", content_type="application/pdf", content=b"%PDF-1.4 test")


@pytest.fixture()
def payload():
    return {"customerName": "Ada Lovelace", "orderAmount": "19.9", "orderDate": "2024-03-01"}
