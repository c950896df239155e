"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from clarity_compass.api.main import create_app
from clarity_compass.infrastructure.database.models import Base
from clarity_compass.infrastructure.database.session import get_db
from clarity_compass.domain.models import ConsortiumInput, Criterion, FinancingInput, Option


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def car_financing() -> FinancingInput:
    """Car bought for 50k with 10k down, 1.5% a month over 48 months"""
    return FinancingInput(total_value=50000, down_payment=10000, interest_rate=1.5, installments=48)


@pytest.fixture
def car_consortium() -> ConsortiumInput:
    """Same car through a consortium with a 15% admin fee over 60 months"""
    return ConsortiumInput(total_value=50000, admin_fee=15, installments=60)


@pytest.fixture
def supplier_criteria() -> list[Criterion]:
    return [
        Criterion(name="Cost", weight=50),
        Criterion(name="Quality", weight=30),
        Criterion(name="Deadline", weight=20),
    ]


@pytest.fixture
def supplier_options() -> list[Option]:
    return [
        Option(name="Option A", scores={"Cost": 10, "Quality": 6, "Deadline": 8}),
        Option(name="Option B", scores={"Cost": 7, "Quality": 9, "Deadline": 9}),
        Option(name="Option C", scores={"Cost": 9, "Quality": 8, "Deadline": 6}),
    ]
