"""
Paginated, sorted transaction listings.
"""

import logging
from typing import Optional, Union

from fintrack.config import settings
from fintrack.exceptions import ValidationError
from fintrack.schemas.filters import SortDirection, SortField, TransactionFilter
from fintrack.schemas.transaction import TransactionListResponse, TransactionResponse
from fintrack.store.base import TransactionStore

logger = logging.getLogger(__name__)


def parse_sort(
    sort_by: Union[SortField, str, None],
    sort_dir: Union[SortDirection, str, None]
) -> tuple[SortField, SortDirection]:
    """Resolve sort parameters, defaulting to newest first."""
    sort_by = sort_by or SortField.date
    sort_dir = sort_dir or SortDirection.desc
    try:
        field = SortField(sort_by.strip().lower())
    except ValueError:
        raise ValidationError("sort_by", "sort_by must be one of: date, amount, category")
    try:
        direction = SortDirection(sort_dir.strip().lower())
    except ValueError:
        raise ValidationError("sort_dir", "sort_dir must be one of: asc, desc")
    return field, direction


def resolve_page_size(page_size: Optional[int]) -> int:
    """Default when absent, clamp to the configured maximum."""
    if page_size is None:
        page_size = settings.default_page_size
    if page_size < 1:
        raise ValidationError("page_size", "page_size must be at least 1")
    return min(page_size, settings.max_page_size)


def list_transactions(
    store: TransactionStore,
    txn_filter: TransactionFilter,
    sort_by: Union[SortField, str, None] = SortField.date,
    sort_dir: Union[SortDirection, str, None] = SortDirection.desc,
    page: int = 1,
    page_size: Optional[int] = None
) -> TransactionListResponse:
    """
    Return one page of the owner's filtered transactions.

    The total count comes from the same filter as the page. Pages past the
    end are empty rather than an error.
    """
    field, direction = parse_sort(sort_by, sort_dir)
    if page < 1:
        raise ValidationError("page", "page must be at least 1")
    page_size = resolve_page_size(page_size)

    total = store.count(txn_filter)
    total_pages = (total + page_size - 1) // page_size

    records = []
    if page <= total_pages:
        records = store.find(
            txn_filter,
            sort_by=field,
            sort_dir=direction,
            offset=(page - 1) * page_size,
            limit=page_size,
        )

    logger.debug(
        f"Listed page {page}/{total_pages} ({len(records)} of {total}) for owner {txn_filter.owner_id}"
    )

    return TransactionListResponse(
        records=[TransactionResponse.model_validate(t) for t in records],
        page=page,
        page_size=page_size,
        total_count=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
