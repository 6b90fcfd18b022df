"""
SQLAlchemy-backed transaction store.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.exceptions import StoreUnavailableError
from fintrack.models.transaction import Transaction
from fintrack.schemas.filters import SortDirection, SortField, TransactionFilter
from fintrack.store.base import TransactionStore

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    SortField.date: Transaction.date,
    SortField.amount: Transaction.amount,
    SortField.category: Transaction.category,
}

DISTINCT_FIELDS = {
    "category": Transaction.category,
    "type": Transaction.type,
}

UPDATABLE_FIELDS = {"type", "amount", "category", "description", "date"}


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlTransactionStore(TransactionStore):
    """Transaction store over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction store {operation} failed: {e}")
            raise StoreUnavailableError(f"Transaction store {operation} failed") from e

    def _conditions(self, txn_filter: TransactionFilter) -> list:
        conditions = [Transaction.owner_id == txn_filter.owner_id]

        if txn_filter.start is not None:
            conditions.append(Transaction.date >= txn_filter.start)
        if txn_filter.end_exclusive is not None:
            conditions.append(Transaction.date < txn_filter.end_exclusive)
        if txn_filter.type is not None:
            conditions.append(Transaction.type == txn_filter.type)
        if txn_filter.category is not None:
            conditions.append(Transaction.category == txn_filter.category)
        if txn_filter.search:
            search_term = f"%{escape_like(txn_filter.search)}%"
            matches = [Transaction.description.ilike(search_term, escape="\\")]
            if txn_filter.search_category:
                matches.append(Transaction.category.ilike(search_term, escape="\\"))
            conditions.append(or_(*matches))

        return conditions

    def find(
        self,
        txn_filter: TransactionFilter,
        sort_by: Optional[SortField] = None,
        sort_dir: SortDirection = SortDirection.desc,
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Transaction]:
        query = self.db.query(Transaction).filter(*self._conditions(txn_filter))

        if sort_by is not None:
            column = SORT_COLUMNS[sort_by]
            primary = column.asc() if sort_dir == SortDirection.asc else column.desc()
            query = query.order_by(primary, Transaction.created_at.desc(), Transaction.id.desc())

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        with self._guard("find"):
            return query.all()

    def count(self, txn_filter: TransactionFilter) -> int:
        with self._guard("count"):
            return self.db.query(Transaction).filter(*self._conditions(txn_filter)).count()

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        with self._guard("get"):
            return self.db.query(Transaction).filter(Transaction.id == transaction_id).first()

    def insert(self, transaction: Transaction) -> Transaction:
        with self._guard("insert"):
            self.db.add(transaction)
            self.db.commit()
            self.db.refresh(transaction)
        return transaction

    def update_by_id(self, transaction_id: str, fields: Dict[str, Any]) -> Optional[Transaction]:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields not updatable: {', '.join(sorted(unknown))}")

        transaction = self.get_by_id(transaction_id)
        if transaction is None:
            return None

        with self._guard("update"):
            for field, value in fields.items():
                setattr(transaction, field, value)
            self.db.commit()
            self.db.refresh(transaction)
        return transaction

    def delete_by_id(self, transaction_id: str) -> bool:
        transaction = self.get_by_id(transaction_id)
        if transaction is None:
            return False

        with self._guard("delete"):
            self.db.delete(transaction)
            self.db.commit()
        return True

    def distinct(self, owner_id: str, field: str) -> List[Any]:
        column = DISTINCT_FIELDS.get(field)
        if column is None:
            raise ValueError(f"Unsupported distinct field: {field}")

        with self._guard("distinct"):
            rows = self.db.query(column).filter(Transaction.owner_id == owner_id).distinct().all()
        return [row[0] for row in rows]
