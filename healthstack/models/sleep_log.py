from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc


def sleep_duration_hours(sleep_start: datetime, sleep_end: datetime) -> float:
    return (sleep_end - sleep_start).total_seconds() / 3600.0


class SleepLog(db.Model):
    __tablename__ = "sleep_logs"
    __table_args__ = (db.Index("ix_sleep_logs_user_sleep_start", "user_id", "sleep_start"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    sleep_start = db.Column(db.DateTime, nullable=False)
    sleep_end = db.Column(db.DateTime, nullable=False)
    # Derived from sleep_start/sleep_end, in hours
    duration = db.Column(db.Float, nullable=False)
    quality = db.Column(db.Integer, nullable=False)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def recompute_duration(self) -> None:
        self.duration = sleep_duration_hours(self.sleep_start, self.sleep_end)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "sleepStart": isoformat_utc(self.sleep_start),
            "sleepEnd": isoformat_utc(self.sleep_end),
            "duration": self.duration,
            "quality": self.quality,
            "notes": self.notes,
            "createdAt": isoformat_utc(self.created_at),
        }
