"""Database session management for the local history store"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from clarity_compass.config import settings
from clarity_compass.infrastructure.database.models import Base

# SQLite connections are shared across FastAPI's threadpool workers
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,  # Verify connections before using
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create the history table if it does not exist yet"""
    Base.metadata.create_all(bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
