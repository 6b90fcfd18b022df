"""
Owner-checked create, read, update and delete of single transactions.
"""

import logging

from fintrack.exceptions import NotFoundError
from fintrack.models.transaction import Transaction
from fintrack.schemas.transaction import TransactionCreate, TransactionUpdate
from fintrack.services.filter_service import require_owner
from fintrack.store.base import TransactionStore

logger = logging.getLogger(__name__)


def _owned(store: TransactionStore, owner_id: str, transaction_id: str) -> Transaction:
    """Fetch a transaction the caller owns. Foreign and missing ids look the same."""
    transaction = store.get_by_id(transaction_id)
    if transaction is None or transaction.owner_id != owner_id:
        raise NotFoundError(transaction_id)
    return transaction


def create_transaction(store: TransactionStore, owner_id: str, data: TransactionCreate) -> Transaction:
    owner_id = require_owner(owner_id)
    transaction = Transaction(
        owner_id=owner_id,
        type=data.type,
        amount=data.amount,
        category=data.category,
        description=data.description,
        date=data.date,
    )
    transaction = store.insert(transaction)
    logger.info(f"Created transaction {transaction.id} for owner {owner_id}")
    return transaction


def get_transaction(store: TransactionStore, owner_id: str, transaction_id: str) -> Transaction:
    owner_id = require_owner(owner_id)
    return _owned(store, owner_id, transaction_id)


def update_transaction(
    store: TransactionStore,
    owner_id: str,
    transaction_id: str,
    data: TransactionUpdate
) -> Transaction:
    """
    Apply a partial update.
    Concurrent updates to the same record are last-write-wins.
    """
    owner_id = require_owner(owner_id)
    _owned(store, owner_id, transaction_id)

    update_data = data.model_dump(exclude_unset=True)
    transaction = store.update_by_id(transaction_id, update_data)
    if transaction is None:
        # Deleted between the ownership check and the write
        raise NotFoundError(transaction_id)

    logger.info(f"Updated transaction {transaction_id} fields {sorted(update_data)} for owner {owner_id}")
    return transaction


def delete_transaction(store: TransactionStore, owner_id: str, transaction_id: str) -> None:
    owner_id = require_owner(owner_id)
    _owned(store, owner_id, transaction_id)

    if not store.delete_by_id(transaction_id):
        raise NotFoundError(transaction_id)
    logger.info(f"Deleted transaction {transaction_id} for owner {owner_id}")
