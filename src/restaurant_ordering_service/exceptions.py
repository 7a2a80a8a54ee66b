"""Domain errors raised by the ordering services.

Repositories report missing records with None/False; the service layer turns
those into the exceptions below, and the API handler maps each one to an
HTTP response.
"""


class OrderingServiceError(Exception):
    """Base class for all recoverable ordering service errors."""


class ValidationError(OrderingServiceError):
    """One or more field-level violations in an inbound payload.

    All violations are collected and reported together.
    """

    def __init__(self, errors: list[str]) -> None:
        """Initialize with the list of violation messages.

        Args:
            errors: Human-readable messages, one per violation
        """
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Combined message enumerating every violation."""
        return "; ".join(self.errors)


class NotFoundError(OrderingServiceError):
    """An operation targeted an id that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidTransitionError(OrderingServiceError):
    """A status change is not permitted by the order workflow."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change order status from {current} to {requested}")
