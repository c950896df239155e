"""SQLAlchemy ORM models for the local decision history"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, JSON, Text, Uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DecisionHistoryEntry(Base):
    """Final decision made by the user"""

    __tablename__ = "decision_history"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    type = Column(Text, nullable=False, index=True)
    context = Column(Text, nullable=False)
    decision = Column(Text, nullable=True)
    details = Column(JSON, nullable=False, default=dict)
    # Python-side default keeps sub-second ordering on SQLite
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    # Insertion order, breaks created_at ties
    sequence = Column(Integer, nullable=False, index=True)
