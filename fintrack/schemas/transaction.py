"""
Transaction schemas.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional
from datetime import date, datetime, timezone
from decimal import Decimal

from fintrack.models.transaction import TransactionType


def coerce_datetime(value: Any) -> Any:
    """Accept plain dates and date-only strings, store naive UTC."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return value


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    date: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("category", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_datetime(v)


class TransactionUpdate(BaseModel):
    """Partial update. Omitted fields keep their value, nulls are rejected."""
    model_config = ConfigDict(extra="forbid")

    type: Optional[TransactionType] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime] = None

    @field_validator("type", "amount", "category", "description", "date", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("category", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_datetime(v)


class TransactionResponse(BaseModel):
    id: str
    owner_id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    records: list[TransactionResponse]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool
