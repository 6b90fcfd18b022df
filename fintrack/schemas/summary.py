"""
Summary schemas.
"""

from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel

from fintrack.models.transaction import TransactionType


class CategoryTotal(BaseModel):
    category: str
    total: Decimal
    percent: float


class MonthlyTrend(BaseModel):
    year: int
    month: int
    type: TransactionType
    total: Decimal


class SummaryResponse(BaseModel):
    type_totals: Dict[TransactionType, Decimal]
    category_breakdown: List[CategoryTotal]
    monthly_trends: List[MonthlyTrend]
    net_balance: Decimal
    total_income: Decimal
    total_expense: Decimal
    transaction_count: int


class CategoryList(BaseModel):
    items: List[str]
    total: int
