"""Shared test fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import datetime
from decimal import Decimal
import uuid

from fintrack.database import Base
from fintrack.dependencies import get_db
from fintrack.main import app
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.store.sql_store import SqlTransactionStore

OWNER = "user-1"
OTHER_OWNER = "user-2"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def store(db_session):
    return SqlTransactionStore(db_session)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def add_transaction(db_session):
    """Factory inserting a transaction directly through the session."""
    def _add(
        type=TransactionType.expense,
        amount="10.00",
        category="Groceries",
        description="Corner shop",
        date=datetime(2024, 1, 15),
        owner_id=OWNER,
        created_at=None,
    ):
        txn = Transaction(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            type=type,
            amount=Decimal(amount),
            category=category,
            description=description,
            date=date,
        )
        if created_at is not None:
            txn.created_at = created_at
        db_session.add(txn)
        db_session.commit()
        db_session.refresh(txn)
        return txn

    return _add


@pytest.fixture
def scenario_transactions(add_transaction):
    """Two grocery expenses across January/February and one January salary."""
    return [
        add_transaction(
            type=TransactionType.expense,
            amount="50.00",
            category="Groceries",
            description="Weekly shop",
            date=datetime(2024, 1, 5),
        ),
        add_transaction(
            type=TransactionType.expense,
            amount="30.00",
            category="Groceries",
            description="Farmers market",
            date=datetime(2024, 2, 10),
        ),
        add_transaction(
            type=TransactionType.income,
            amount="1000.00",
            category="Salary",
            description="January salary",
            date=datetime(2024, 1, 31),
        ),
    ]


@pytest.fixture
def other_owner_transaction(add_transaction):
    """A transaction belonging to someone else."""
    return add_transaction(
        type=TransactionType.expense,
        amount="999.00",
        category="Travel",
        description="Someone else's flight",
        date=datetime(2024, 1, 20),
        owner_id=OTHER_OWNER,
    )
