"""Data access layer for the decision history"""

from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from clarity_compass.infrastructure.database.models import DecisionHistoryEntry
from clarity_compass.domain.models import DecisionRecord


class DecisionHistoryRepository:
    """Repository for final decisions, newest first"""

    def __init__(self, db: Session):
        self.db = db

    def add_decision(
        self,
        decision_type: str,
        context: str,
        decision: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> DecisionHistoryEntry:
        """Append a decision to the history"""
        last_sequence = self.db.query(func.max(DecisionHistoryEntry.sequence)).scalar() or 0
        entry = DecisionHistoryEntry(
            type=decision_type,
            context=context,
            decision=decision,
            details=details or {},
            sequence=last_sequence + 1,
        )
        self.db.add(entry)
        self.db.flush()  # Get ID and timestamp without committing
        return entry

    def list_decisions(self, limit: int = 50) -> List[DecisionHistoryEntry]:
        """Fetch the most recent decisions"""
        return (
            self.db.query(DecisionHistoryEntry)
            .order_by(DecisionHistoryEntry.created_at.desc(), DecisionHistoryEntry.sequence.desc())
            .limit(limit)
            .all()
        )

    def clear(self) -> int:
        """Delete the whole history, returning how many entries were removed"""
        return self.db.query(DecisionHistoryEntry).delete()


def to_record(entry: DecisionHistoryEntry) -> DecisionRecord:
    """Map an ORM row to the domain record"""
    return DecisionRecord(
        id=entry.id,
        type=entry.type,
        context=entry.context,
        date=entry.created_at,
        decision=entry.decision,
        details=dict(entry.details or {}),
    )
