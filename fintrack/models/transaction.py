"""
Transaction database model.
"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, Text, Enum, Index
from fintrack.database import Base


class TransactionType(str, enum.Enum):
    """Transaction type enumeration. Declaration order is the display order."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(64), nullable=False, index=True)
    type = Column(Enum(TransactionType), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Always positive, sign comes from type
    category = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_owner_date", "owner_id", "date"),
        Index("idx_transaction_owner_category", "owner_id", "category"),
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.id} {self.type} {self.amount} {self.date}>"
