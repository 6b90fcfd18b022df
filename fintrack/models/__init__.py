"""
Database models package.
"""

from fintrack.models.transaction import Transaction, TransactionType

__all__ = [
    "Transaction",
    "TransactionType",
]
