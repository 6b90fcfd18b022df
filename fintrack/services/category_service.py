"""
Distinct categories an owner has used, for populating filters.
"""

from typing import List

from fintrack.services.filter_service import require_owner
from fintrack.store.base import TransactionStore


def list_categories(store: TransactionStore, owner_id: str) -> List[str]:
    """All non-blank categories across the owner's transactions, sorted case-insensitively."""
    owner_id = require_owner(owner_id)
    values = store.distinct(owner_id, "category")
    categories = {v for v in values if v and v.strip()}
    return sorted(categories, key=lambda c: (c.casefold(), c))
