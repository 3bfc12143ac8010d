from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc, utcnow_millis


class FoodLog(db.Model):
    __tablename__ = "food_logs"
    __table_args__ = (db.Index("ix_food_logs_user_logged_at", "user_id", "logged_at"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    food_name = db.Column(db.String(200), nullable=False)
    calories = db.Column(db.Float, nullable=False)
    protein = db.Column(db.Float)
    carbs = db.Column(db.Float)
    fat = db.Column(db.Float)
    fiber = db.Column(db.Float)
    meal_type = db.Column(db.String(20), nullable=False)
    serving_size = db.Column(db.String(100))
    notes = db.Column(db.Text)
    logged_at = db.Column(db.DateTime, nullable=False, default=utcnow_millis)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "foodName": self.food_name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "fiber": self.fiber,
            "mealType": self.meal_type,
            "servingSize": self.serving_size,
            "notes": self.notes,
            "loggedAt": isoformat_utc(self.logged_at),
            "createdAt": isoformat_utc(self.created_at),
        }
