"""Error taxonomy for order intake.

Only ``ValidationError``, ``UploadAcceptanceError`` and ``StorageError`` ever
reach a caller. ``CollaboratorError`` describes a failed best-effort call and is
logged by the submission pipeline, never raised past it.
"""


class OrderFlowError(Exception):
    """Base class for order intake errors."""


class ValidationError(OrderFlowError):
    """The order payload failed one or more field checks."""

    def __init__(self, errors):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Invalid order payload: {fields}")


class UploadAcceptanceError(OrderFlowError):
    """The invoice file was rejected at intake (wrong type or too large)."""


class StorageError(OrderFlowError):
    """The order store was unreachable or rejected the write."""


class CollaboratorError(OrderFlowError):
    """A best-effort collaborator (invoice storage, notifier) failed."""

    def __init__(self, collaborator: str, reason: str):
        self.collaborator = collaborator
        self.reason = reason
        super().__init__(f"{collaborator} failed: {reason}")
