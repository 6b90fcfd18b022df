"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, Response
from typing import Optional

from fintrack.dependencies import get_owner_id, get_store
from fintrack.schemas.summary import CategoryList, SummaryResponse
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
    TransactionListResponse
)
from fintrack.services import category_service, listing_service, summary_service, transaction_service
from fintrack.services.filter_service import build_filter
from fintrack.store.base import TransactionStore

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    type: Optional[str] = None,
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort_by: str = "date",
    sort_dir: str = "desc",
    page: int = 1,
    page_size: Optional[int] = None,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    """List transactions with filtering, sorting and pagination"""
    txn_filter = build_filter(
        owner_id,
        start_date=start_date,
        end_date=end_date,
        type=type,
        category=category,
        search=search,
        search_category=True,
    )
    return listing_service.list_transactions(
        store,
        txn_filter,
        sort_by=sort_by,
        sort_dir=sort_dir,
        page=page,
        page_size=page_size,
    )


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    """
    Type totals, expense breakdown by category, monthly trends and net balance.
    Only the date range applies here.
    """
    txn_filter = build_filter(owner_id, start_date=start_date, end_date=end_date)
    return summary_service.summarize(store, txn_filter)


@router.get("/categories", response_model=CategoryList)
def get_categories(
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    """Distinct categories the caller has used"""
    categories = category_service.list_categories(store, owner_id)
    return CategoryList(items=categories, total=len(categories))


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreate,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    transaction = transaction_service.create_transaction(store, owner_id, data)
    return TransactionResponse.model_validate(transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    """Get a single transaction"""
    transaction = transaction_service.get_transaction(store, owner_id, transaction_id)
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    """Update a transaction the caller owns"""
    transaction = transaction_service.update_transaction(store, owner_id, transaction_id, update)
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    owner_id: str = Depends(get_owner_id),
    store: TransactionStore = Depends(get_store)
):
    transaction_service.delete_transaction(store, owner_id, transaction_id)
    return Response(status_code=204)
