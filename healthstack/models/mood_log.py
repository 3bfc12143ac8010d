from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc, utcnow_millis


class MoodLog(db.Model):
    __tablename__ = "mood_logs"
    __table_args__ = (db.Index("ix_mood_logs_user_logged_at", "user_id", "logged_at"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    mood = db.Column(db.Integer, nullable=False)
    energy = db.Column(db.Integer)
    stress = db.Column(db.Integer)
    notes = db.Column(db.Text)
    logged_at = db.Column(db.DateTime, nullable=False, default=utcnow_millis)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "mood": self.mood,
            "energy": self.energy,
            "stress": self.stress,
            "notes": self.notes,
            "loggedAt": isoformat_utc(self.logged_at),
            "createdAt": isoformat_utc(self.created_at),
        }
