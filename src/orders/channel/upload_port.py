"""Invoice upload port: abstract interface for invoice file storage."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class InvoiceFile:
    """An invoice document accepted at intake."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        _, dot, ext = self.filename.rpartition(".")
        return ext.lower() if dot and ext else "pdf"


@dataclass(frozen=True)
class UploadResult:
    """Result of an invoice upload attempt."""

    success: bool
    url: str | None = None
    failure_reason: str | None = None


class InvoiceUploadPort(ABC):
    """Abstract interface for invoice storage adapters."""

    @abstractmethod
    def upload(self, invoice: InvoiceFile, order_id: str) -> UploadResult:
        """Store the invoice for ``order_id`` and return its locator on success."""
        ...
