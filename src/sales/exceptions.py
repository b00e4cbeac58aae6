"""Typed failures raised by the Sales domain.

Every failure is a Protean exception so the FastAPI integration maps it to an
HTTP status: ``ValidationError`` subclasses become 400, ``ObjectNotFoundError``
subclasses become 404. Each carries a ``{field: [messages]}`` dict.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class OrderNotFound(ObjectNotFoundError):
    """The referenced order does not exist."""


class InvalidTransition(ValidationError):
    """The order state machine does not allow the requested status change."""


class OrderNotCompleted(ValidationError):
    """An invoice was requested for an order that is not Completed."""


class DuplicateInvoice(ValidationError):
    """The order already has an invoice."""


class InvalidWindow(ValidationError):
    """A custom reporting window is missing a bound or has start after end."""


class InvalidOrderDate(ValidationError):
    """An order date could not be read as a calendar date."""
