"""
Base class for transaction stores.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from fintrack.models.transaction import Transaction
from fintrack.schemas.filters import SortDirection, SortField, TransactionFilter


class TransactionStore(ABC):
    """
    Persistence contract the services consume.

    Implementations raise StoreUnavailableError when the backend fails and
    never retry on their own.
    """

    @abstractmethod
    def find(
        self,
        txn_filter: TransactionFilter,
        sort_by: Optional[SortField] = None,
        sort_dir: SortDirection = SortDirection.desc,
        offset: int = 0,
        limit: Optional[int] = None
    ) -> List[Transaction]:
        """
        Return transactions matching the filter.
        With sort_by set, ties fall back to created_at then id, both descending.
        """
        pass

    @abstractmethod
    def count(self, txn_filter: TransactionFilter) -> int:
        """Number of transactions matching the filter"""
        pass

    @abstractmethod
    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        pass

    @abstractmethod
    def insert(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction, assigning id and created_at"""
        pass

    @abstractmethod
    def update_by_id(self, transaction_id: str, fields: Dict[str, Any]) -> Optional[Transaction]:
        """Apply fields to one transaction. None when the id is unknown"""
        pass

    @abstractmethod
    def delete_by_id(self, transaction_id: str) -> bool:
        pass

    @abstractmethod
    def distinct(self, owner_id: str, field: str) -> List[Any]:
        """Distinct values of one column across an owner's transactions"""
        pass
