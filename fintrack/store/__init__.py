"""
Transaction store package.
"""

from fintrack.store.base import TransactionStore
from fintrack.store.sql_store import SqlTransactionStore

__all__ = ['TransactionStore', 'SqlTransactionStore']
