"""
Translate raw filter parameters into a normalized TransactionFilter.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from fintrack.exceptions import AuthorizationError, InvalidFilterError
from fintrack.models.transaction import TransactionType
from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.transaction import coerce_datetime

logger = logging.getLogger(__name__)

ALL = "all"

DateInput = Union[date, datetime, str, None]


def require_owner(owner_id: Optional[str]) -> str:
    """Return the stripped owner id, or fail when no caller identity was given."""
    if owner_id is None or not str(owner_id).strip():
        raise AuthorizationError("Caller identity is required")
    return str(owner_id).strip()


def parse_calendar_date(value: DateInput, field: str) -> Optional[date]:
    """
    Parse a calendar date.

    Accepts date objects, datetimes (time part dropped) and ISO strings.
    Timestamps with an offset are moved to UTC first, matching how
    transaction dates are stored.
    Empty strings count as absent.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return coerce_datetime(value).date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidFilterError(field, "Invalid date format, expected YYYY-MM-DD")

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return coerce_datetime(datetime.fromisoformat(text)).date()
    except ValueError:
        raise InvalidFilterError(field, "Invalid date format, expected YYYY-MM-DD")


def _is_unfiltered(value: Optional[str]) -> bool:
    return value is None or not value.strip() or value.strip().lower() == ALL


def parse_type(value: Union[TransactionType, str, None]) -> Optional[TransactionType]:
    if isinstance(value, TransactionType):
        return value
    if _is_unfiltered(value):
        return None
    try:
        return TransactionType(value.strip().lower())
    except ValueError:
        raise InvalidFilterError("type", f"Type must be one of: income, expense, {ALL}")


def build_filter(
    owner_id: str,
    start_date: DateInput = None,
    end_date: DateInput = None,
    type: Union[TransactionType, str, None] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    search_category: bool = False
) -> TransactionFilter:
    """
    Build the predicate for one owner.

    The end date is inclusive for the whole day: it is moved forward one day
    and used as an exclusive bound. Either side of the range may be left open.
    """
    owner_id = require_owner(owner_id)

    start = parse_calendar_date(start_date, "start_date")
    end = parse_calendar_date(end_date, "end_date")

    start_at = datetime.combine(start, time.min) if start else None
    end_exclusive = None
    # Nothing is stored past the last representable day, so leave it open
    if end is not None and end < date.max:
        end_exclusive = datetime.combine(end + timedelta(days=1), time.min)

    if start_at is not None and end_exclusive is not None and start_at > end_exclusive:
        raise InvalidFilterError("start_date", "start_date must not be after end_date")

    search_text = search.strip() if search else None

    txn_filter = TransactionFilter(
        owner_id=owner_id,
        start=start_at,
        end_exclusive=end_exclusive,
        type=parse_type(type),
        category=None if _is_unfiltered(category) else category.strip(),
        search=search_text or None,
        search_category=search_category,
    )
    logger.debug(f"Built filter {txn_filter!r}")
    return txn_filter
