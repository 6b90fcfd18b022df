"""
Normalized query filter shared by the listing and summary services.
"""

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from fintrack.models.transaction import TransactionType


class TransactionFilter(BaseModel):
    """
    Owner-scoped predicate over transactions.

    The date range is half-open: ``start <= date < end_exclusive``. Either
    side may be missing. ``None`` on any other field means no constraint.
    """

    model_config = ConfigDict(frozen=True)

    owner_id: str
    start: Optional[datetime] = None
    end_exclusive: Optional[datetime] = None
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    search: Optional[str] = None
    search_category: bool = False

    def summary_scope(self) -> "TransactionFilter":
        """Same owner and date range, every other criterion dropped."""
        return TransactionFilter(
            owner_id=self.owner_id,
            start=self.start,
            end_exclusive=self.end_exclusive,
        )


class SortField(str, enum.Enum):
    """Columns a listing may be ordered by."""
    date = "date"
    amount = "amount"
    category = "category"


class SortDirection(str, enum.Enum):
    asc = "asc"
    desc = "desc"
