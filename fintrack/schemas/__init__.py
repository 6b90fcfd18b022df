"""
Pydantic schemas package.
"""

from fintrack.schemas.filters import (
    SortDirection,
    SortField,
    TransactionFilter,
)
from fintrack.schemas.summary import (
    CategoryList,
    CategoryTotal,
    MonthlyTrend,
    SummaryResponse,
)
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
)

__all__ = [
    "SortDirection",
    "SortField",
    "TransactionFilter",
    "CategoryList",
    "CategoryTotal",
    "MonthlyTrend",
    "SummaryResponse",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
]
