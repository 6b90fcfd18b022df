"""
Error types raised by the transaction services.
"""

from typing import Optional


class FintrackError(Exception):
    """Base class for every error the services raise on purpose."""


class ValidationError(FintrackError, ValueError):
    """Malformed caller input. Always names the offending field."""

    def __init__(self, field: Optional[str], message: str):
        super().__init__(f"{field}: {message}" if field else message)
        self.field = field
        self.message = message


class InvalidFilterError(ValidationError):
    """Filter criteria that cannot be turned into a query."""


class NotFoundError(FintrackError, LookupError):
    """
    Transaction does not exist or belongs to someone else.

    The two cases share one message so callers cannot probe for other
    users' records.
    """

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id


class AuthorizationError(FintrackError):
    """No caller identity was supplied for an owner-scoped operation."""


class StoreUnavailableError(FintrackError):
    """The transaction store failed to read or write."""
