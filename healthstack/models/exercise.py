from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc, utcnow_millis


class Exercise(db.Model):
    __tablename__ = "exercises"
    __table_args__ = (db.Index("ix_exercises_user_logged_at", "user_id", "logged_at"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    exercise_name = db.Column(db.String(200), nullable=False)
    exercise_type = db.Column(db.String(20), nullable=False)
    duration = db.Column(db.Float, nullable=False)  # minutes
    calories = db.Column(db.Float)
    distance = db.Column(db.Float)
    intensity = db.Column(db.String(20))
    notes = db.Column(db.Text)
    logged_at = db.Column(db.DateTime, nullable=False, default=utcnow_millis)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "exerciseName": self.exercise_name,
            "exerciseType": self.exercise_type,
            "duration": self.duration,
            "calories": self.calories,
            "distance": self.distance,
            "intensity": self.intensity,
            "notes": self.notes,
            "loggedAt": isoformat_utc(self.logged_at),
            "createdAt": isoformat_utc(self.created_at),
        }
