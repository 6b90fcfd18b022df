"""Tests for paginated transaction listings."""

import pytest
from datetime import datetime
from decimal import Decimal

from fintrack.config import settings
from fintrack.exceptions import ValidationError
from fintrack.models.transaction import TransactionType
from fintrack.schemas.transaction import TransactionCreate
from fintrack.services.filter_service import build_filter
from fintrack.services.listing_service import list_transactions
from fintrack.services.transaction_service import create_transaction


class TestPagination:
    """Test page windows and metadata."""

    def test_empty(self, store):
        """No transactions should give an empty first page."""
        result = list_transactions(store, build_filter("user-1"))
        assert result.records == []
        assert result.total_count == 0
        assert result.total_pages == 0
        assert result.has_next is False
        assert result.has_prev is False

    def test_metadata(self, store, add_transaction):
        """Metadata should describe the filtered set."""
        for day in range(1, 6):
            add_transaction(date=datetime(2024, 1, day))

        result = list_transactions(store, build_filter("user-1"), page=2, page_size=2)
        assert len(result.records) == 2
        assert result.total_count == 5
        assert result.total_pages == 3
        assert result.has_next is True
        assert result.has_prev is True

    def test_sequential_pages_cover_everything_once(self, store, add_transaction):
        """Walking every page yields each record exactly once, even with equal sort keys."""
        created = [add_transaction(date=datetime(2024, 1, 1), amount="5.00") for _ in range(7)]

        seen = []
        page = 1
        while True:
            result = list_transactions(
                store, build_filter("user-1"), sort_by="amount", page=page, page_size=3
            )
            seen.extend(r.id for r in result.records)
            if not result.has_next:
                break
            page += 1

        assert len(seen) == 7
        assert set(seen) == {t.id for t in created}

    def test_page_past_end_is_empty(self, store, add_transaction):
        """Pages beyond the last one are empty, not an error."""
        add_transaction()
        result = list_transactions(store, build_filter("user-1"), page=5, page_size=10)
        assert result.records == []
        assert result.total_count == 1
        assert result.has_next is False
        assert result.has_prev is True

    def test_page_size_capped(self, store, add_transaction):
        """Oversized pages are clamped to the configured maximum."""
        add_transaction()
        result = list_transactions(store, build_filter("user-1"), page_size=settings.max_page_size + 500)
        assert result.page_size == settings.max_page_size

    def test_default_page_size(self, store):
        result = list_transactions(store, build_filter("user-1"))
        assert result.page_size == settings.default_page_size

    def test_invalid_page_rejected(self, store):
        with pytest.raises(ValidationError) as exc_info:
            list_transactions(store, build_filter("user-1"), page=0)
        assert exc_info.value.field == "page"

    def test_invalid_page_size_rejected(self, store):
        with pytest.raises(ValidationError):
            list_transactions(store, build_filter("user-1"), page_size=0)


class TestSorting:
    """Test sort keys and the created_at tie-break."""

    def test_default_is_newest_first(self, store, add_transaction):
        older = add_transaction(date=datetime(2024, 1, 1))
        newer = add_transaction(date=datetime(2024, 3, 1))
        result = list_transactions(store, build_filter("user-1"))
        assert [r.id for r in result.records] == [newer.id, older.id]

    def test_amount_ascending(self, store, add_transaction):
        big = add_transaction(amount="100.00")
        small = add_transaction(amount="2.50")
        result = list_transactions(store, build_filter("user-1"), sort_by="amount", sort_dir="asc")
        assert [r.id for r in result.records] == [small.id, big.id]

    def test_category_sort(self, store, add_transaction):
        rent = add_transaction(category="Rent")
        coffee = add_transaction(category="Coffee")
        result = list_transactions(store, build_filter("user-1"), sort_by="category", sort_dir="asc")
        assert [r.category for r in result.records] == ["Coffee", "Rent"]
        assert result.records[0].id == coffee.id
        assert result.records[1].id == rent.id

    def test_ties_break_on_most_recently_created(self, store, add_transaction):
        """Equal primary keys fall back to created_at descending."""
        first = add_transaction(amount="10.00", created_at=datetime(2024, 5, 1, 9, 0))
        second = add_transaction(amount="10.00", created_at=datetime(2024, 5, 1, 10, 0))
        for sort_dir in ("asc", "desc"):
            result = list_transactions(store, build_filter("user-1"), sort_by="amount", sort_dir=sort_dir)
            assert [r.id for r in result.records] == [second.id, first.id]

    def test_invalid_sort_rejected(self, store):
        with pytest.raises(ValidationError) as exc_info:
            list_transactions(store, build_filter("user-1"), sort_by="merchant")
        assert exc_info.value.field == "sort_by"

        with pytest.raises(ValidationError) as exc_info:
            list_transactions(store, build_filter("user-1"), sort_dir="sideways")
        assert exc_info.value.field == "sort_dir"


class TestFiltering:
    """Test that listings honor every filter criterion."""

    def test_owner_scoped(self, store, scenario_transactions, other_owner_transaction):
        result = list_transactions(store, build_filter("user-1"))
        assert result.total_count == 3
        assert other_owner_transaction.id not in {r.id for r in result.records}

    def test_type_filter(self, store, scenario_transactions):
        result = list_transactions(store, build_filter("user-1", type="income"))
        assert result.total_count == 1
        assert result.records[0].type == TransactionType.income

    def test_category_filter(self, store, scenario_transactions):
        result = list_transactions(store, build_filter("user-1", category="Groceries"))
        assert result.total_count == 2

    def test_end_date_includes_whole_day(self, store, add_transaction):
        """Late on the end date is in, the next day is out."""
        late = add_transaction(date=datetime(2024, 1, 31, 23, 59, 59))
        add_transaction(date=datetime(2024, 2, 1, 0, 0, 0))
        result = list_transactions(store, build_filter("user-1", end_date="2024-01-31"))
        assert [r.id for r in result.records] == [late.id]

    def test_offset_bounds_match_offset_record(self, store):
        """A record and a range given in the same offset agree on the day."""
        stamp = "2024-02-01T02:00:00+05:00"
        created = create_transaction(store, "user-1", TransactionCreate(
            type="expense",
            amount="12.00",
            category="Travel",
            description="Night taxi",
            date=stamp,
        ))
        result = list_transactions(store, build_filter("user-1", start_date=stamp, end_date=stamp))
        assert [r.id for r in result.records] == [created.id]

    def test_search_description_case_insensitive(self, store, scenario_transactions):
        result = list_transactions(store, build_filter("user-1", search="FARMERS"))
        assert result.total_count == 1
        assert result.records[0].description == "Farmers market"

    def test_search_category_when_enabled(self, store, scenario_transactions):
        assert list_transactions(store, build_filter("user-1", search="salary")).total_count == 1
        assert list_transactions(store, build_filter("user-1", search="grocer")).total_count == 0
        result = list_transactions(store, build_filter("user-1", search="grocer", search_category=True))
        assert result.total_count == 2

    def test_search_wildcards_match_literally(self, store, add_transaction):
        add_transaction(description="100% cotton shirt")
        add_transaction(description="1000 cotton shirts")
        result = list_transactions(store, build_filter("user-1", search="100%"))
        assert result.total_count == 1

    def test_total_reflects_filters(self, store, scenario_transactions):
        """Count comes from the filtered set, not the whole collection."""
        result = list_transactions(store, build_filter("user-1", type="expense"), page_size=1)
        assert result.total_count == 2
        assert result.total_pages == 2
        assert result.records[0].amount == Decimal("30.00")
