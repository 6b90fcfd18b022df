"""
FastAPI dependencies.
"""

from typing import Generator, Optional
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
from fintrack.database import SessionLocal
from fintrack.store.sql_store import SqlTransactionStore


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> SqlTransactionStore:
    return SqlTransactionStore(db)


def get_owner_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Caller identity, resolved upstream by the auth layer and forwarded
    in the X-User-Id header.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()
