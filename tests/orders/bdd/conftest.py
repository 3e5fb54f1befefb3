"""Shared BDD fixtures and step definitions for order submission."""

import pytest
from orders.channel.upload_port import InvoiceFile
from pytest_bdd import given, parsers


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def attachment():
    """Holder for the invoice attached to the next submission."""
    return {"invoice": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a PDF invoice named "{filename}"'))
def pdf_invoice(attachment, filename):
    attachment["invoice"] = InvoiceFile(filename=filename, content_type="application/pdf", content=b"%PDF-1.4")


@given("invoice storage is unavailable")
def storage_unavailable(uploader):
    uploader.configure(should_succeed=False, failure_reason="Bucket unreachable")


@given("the notifier is unavailable")
def notifier_unavailable(notifier):
    notifier.configure(should_succeed=False, failure_reason="Topic unreachable")
