"""
Record Repository

Owner-scoped CRUD shared by every per-user log resource. Every query is
constrained by ``user_id``; a record owned by someone else behaves exactly
like a missing one. Operations signal "not found" by returning None/False
and leave HTTP concerns to the controllers.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from healthstack.extensions import db
from healthstack.services.filters import NO_FILTER, RecordFilter
from healthstack.utils.dates import utcnow_millis

logger = logging.getLogger(__name__)

# Largest value an INTEGER primary key holds on every supported database
MAX_RECORD_ID = 2**31 - 1


class InvalidRecord(ValueError):
    """A write that would leave a record in an inconsistent state."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class RecordRepository:
    def __init__(
        self,
        model,
        timestamp_field: str,
        category_field: Optional[str] = None,
        default_timestamp: bool = True,
        query_options: Sequence[Any] = (),
    ):
        self.model = model
        self.timestamp_field = timestamp_field
        self.category_field = category_field
        self.default_timestamp = default_timestamp
        self.query_options = tuple(query_options)

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def _owned(self, user_id: int):
        query = self.model.query.filter(self.model.user_id == user_id)
        if self.query_options:
            query = query.options(*self.query_options)
        return query

    def _commit(self) -> None:
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def apply_fields(self, record, fields: Dict[str, Any]) -> None:
        for key, value in fields.items():
            setattr(record, key, value)

    def create(self, user_id: int, fields: Dict[str, Any]):
        record = self.model()
        self.apply_fields(record, fields)
        # Owner always comes from the token, never from the body
        record.user_id = user_id
        if self.default_timestamp and getattr(record, self.timestamp_field) is None:
            setattr(record, self.timestamp_field, utcnow_millis())
        db.session.add(record)
        self._commit()
        logger.info("created %s id=%s user=%s", self.name, record.id, user_id)
        return record

    def list(self, user_id: int, record_filter: RecordFilter = NO_FILTER) -> List[Any]:
        timestamp_column = getattr(self.model, self.timestamp_field)
        category_column = getattr(self.model, self.category_field) if self.category_field else None
        query = record_filter.apply(self._owned(user_id), timestamp_column, category_column)
        return query.order_by(timestamp_column.desc(), self.model.id.desc()).all()

    def get(self, user_id: int, record_id: int):
        if not 0 < record_id <= MAX_RECORD_ID:
            logger.debug("%s id=%s out of range", self.name, record_id)
            return None
        record = self._owned(user_id).filter(self.model.id == record_id).first()
        if record is None:
            logger.debug("%s id=%s not found for user=%s", self.name, record_id, user_id)
        return record

    def update(self, user_id: int, record_id: int, fields: Dict[str, Any]):
        record = self.get(user_id, record_id)
        if record is None:
            return None
        self.apply_fields(record, fields)
        self._commit()
        logger.info("updated %s id=%s user=%s", self.name, record.id, user_id)
        return record

    def delete(self, user_id: int, record_id: int) -> bool:
        record = self.get(user_id, record_id)
        if record is None:
            return False
        db.session.delete(record)
        self._commit()
        logger.info("deleted %s id=%s user=%s", self.name, record_id, user_id)
        return True


class SleepLogRepository(RecordRepository):
    """Keeps ``duration`` in step with the sleep window on every write."""

    def apply_fields(self, record, fields: Dict[str, Any]) -> None:
        sleep_start = fields.get("sleep_start", record.sleep_start)
        sleep_end = fields.get("sleep_end", record.sleep_end)
        if sleep_start is None or sleep_end is None:
            raise InvalidRecord("sleepStart", "sleepStart and sleepEnd are required")
        if sleep_end <= sleep_start:
            raise InvalidRecord("sleepEnd", "sleepEnd must be after sleepStart")
        super().apply_fields(record, fields)
        record.recompute_duration()
