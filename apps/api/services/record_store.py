"""
BMI Record Store

Persistence port for permitted BMI submissions, keyed by caller identity.

- put(owner, record)   insert or overwrite (last write wins)
- get(owner)           the stored record, or None
- delete(owner)        True if a record was removed

Two adapters: an in-memory dict for embedding and tests, and a
SQLAlchemy adapter over the bmi_record table.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from sqlalchemy.orm import Session

from models import BmiRecord as BmiRecordRow
from services.bmi_evaluator import BmiRecord, Category

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def put(self, owner: str, record: BmiRecord) -> None: ...

    def get(self, owner: str) -> Optional[BmiRecord]: ...

    def delete(self, owner: str) -> bool: ...


class InMemoryRecordStore:
    """Dict-backed store. Not shared between processes."""

    def __init__(self):
        self._records: Dict[str, BmiRecord] = {}

    def put(self, owner: str, record: BmiRecord) -> None:
        self._records[owner] = record

    def get(self, owner: str) -> Optional[BmiRecord]:
        return self._records.get(owner)

    def delete(self, owner: str) -> bool:
        return self._records.pop(owner, None) is not None

    def __len__(self) -> int:
        return len(self._records)


class SqlAlchemyRecordStore:
    """
    Store backed by the bmi_record table.

    Flushes but does not commit; the request's get_db dependency owns
    the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def put(self, owner: str, record: BmiRecord) -> None:
        row = self.db.get(BmiRecordRow, owner)
        if row is None:
            row = BmiRecordRow(owner=owner)
            self.db.add(row)
        else:
            logger.debug(f"Overwriting stored BMI record for {owner}")
        row.weight = record.weight
        row.height = record.height
        row.bmi = record.bmi
        row.category = record.category.value
        self.db.flush()

    def get(self, owner: str) -> Optional[BmiRecord]:
        row = self.db.get(BmiRecordRow, owner)
        if row is None:
            return None
        return BmiRecord(
            owner=row.owner,
            weight=row.weight,
            height=row.height,
            bmi=row.bmi,
            category=Category(row.category),
        )

    def delete(self, owner: str) -> bool:
        row = self.db.get(BmiRecordRow, owner)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
