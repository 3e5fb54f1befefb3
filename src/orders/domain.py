"""Orders bounded context: order intake and lookup.

Validates and persists orders, then hands them to best-effort invoice storage
and order notification channels.
"""

from protean.domain import Domain

from orders.utils.logging import configure_logging

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="orderflow")

# Domain Composition Root
orders = Domain(name="orders")
