"""
Summary statistics over an owner's transactions.

Type totals, the expense category breakdown and monthly trends are built
from a single store read in one pass, so every view describes the same
snapshot. Only the owner and date range of the filter apply here; type,
category and search criteria are listing concerns and are ignored.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from fintrack.models.transaction import Transaction, TransactionType
from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.summary import CategoryTotal, MonthlyTrend, SummaryResponse
from fintrack.store.base import TransactionStore

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

TYPE_ORDER = {t: i for i, t in enumerate(TransactionType)}


def aggregate(transactions: Iterable[Transaction]) -> SummaryResponse:
    """Compute every summary view from an already filtered set of transactions."""
    type_totals: Dict[TransactionType, Decimal] = {}
    category_totals: Dict[str, Decimal] = {}
    month_totals: Dict[Tuple[int, int, TransactionType], Decimal] = {}
    count = 0

    for t in transactions:
        count += 1
        txn_type = TransactionType(t.type)
        amount = Decimal(t.amount)

        type_totals[txn_type] = type_totals.get(txn_type, ZERO) + amount

        if txn_type == TransactionType.expense and t.category and t.category.strip():
            category_totals[t.category] = category_totals.get(t.category, ZERO) + amount

        bucket = (t.date.year, t.date.month, txn_type)
        month_totals[bucket] = month_totals.get(bucket, ZERO) + amount

    total_income = type_totals.get(TransactionType.income, ZERO)
    total_expense = type_totals.get(TransactionType.expense, ZERO)

    return SummaryResponse(
        type_totals={t: type_totals[t] for t in TransactionType if t in type_totals},
        category_breakdown=category_breakdown(category_totals, total_expense),
        monthly_trends=monthly_trends(month_totals),
        net_balance=total_income - total_expense,
        total_income=total_income,
        total_expense=total_expense,
        transaction_count=count,
    )


def category_breakdown(category_totals: Dict[str, Decimal], total_expense: Decimal) -> List[CategoryTotal]:
    """Largest spend first, ties by category name."""
    ranked = sorted(category_totals.items(), key=lambda x: (-x[1], x[0]))
    return [
        CategoryTotal(
            category=category,
            total=total,
            percent=round(float(total / total_expense * 100), 2) if total_expense > 0 else 0.0,
        )
        for category, total in ranked
    ]


def monthly_trends(month_totals: Dict[Tuple[int, int, TransactionType], Decimal]) -> List[MonthlyTrend]:
    """Chronological, income before expense within a month."""
    buckets = sorted(month_totals.items(), key=lambda x: (x[0][0], x[0][1], TYPE_ORDER[x[0][2]]))
    return [
        MonthlyTrend(year=year, month=month, type=txn_type, total=total)
        for (year, month, txn_type), total in buckets
    ]


def summarize(store: TransactionStore, txn_filter: TransactionFilter) -> SummaryResponse:
    """
    Summarize the owner's activity over the filter's date range.
    Store failures propagate, so a summary is either complete or not returned.
    """
    scope = txn_filter.summary_scope()
    transactions = store.find(scope)
    summary = aggregate(transactions)

    logger.debug(
        f"Summarized {summary.transaction_count} transactions for owner {scope.owner_id}"
    )
    return summary
