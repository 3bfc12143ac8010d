from datetime import datetime

from healthstack.extensions import db
from healthstack.utils.dates import isoformat_utc


class MealPlan(db.Model):
    __tablename__ = "meal_plans"
    __table_args__ = (db.Index("ix_meal_plans_user_date", "user_id", "date"),)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = db.Column(db.DateTime, nullable=False)
    diet_type = db.Column(db.String(20))
    target_calories = db.Column(db.Float)
    target_protein = db.Column(db.Float)
    target_carbs = db.Column(db.Float)
    target_fat = db.Column(db.Float)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    meals = db.relationship(
        "Meal",
        backref="meal_plan",
        cascade="all, delete-orphan",
        order_by="Meal.position",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": isoformat_utc(self.date),
            "dietType": self.diet_type,
            "targetCalories": self.target_calories,
            "targetProtein": self.target_protein,
            "targetCarbs": self.target_carbs,
            "targetFat": self.target_fat,
            "notes": self.notes,
            "createdAt": isoformat_utc(self.created_at),
            "meals": [meal.to_dict() for meal in self.meals],
        }


class Meal(db.Model):
    __tablename__ = "meals"
    # Replaced meals never get their old ids back
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    meal_plan_id = db.Column(
        db.Integer, db.ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = db.Column(db.Integer, nullable=False, default=0)
    meal_type = db.Column(db.String(20), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    calories = db.Column(db.Float)
    protein = db.Column(db.Float)
    carbs = db.Column(db.Float)
    fat = db.Column(db.Float)

    def to_dict(self):
        return {
            "id": self.id,
            "mealPlanId": self.meal_plan_id,
            "mealType": self.meal_type,
            "name": self.name,
            "description": self.description,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }
