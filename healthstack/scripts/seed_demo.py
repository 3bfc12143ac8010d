"""
Demo data for local development.

Creates the demo account with one day of food, exercise, sleep and mood logs,
a meal plan and a shopping list. Running it twice leaves the data unchanged.
"""

import logging
from datetime import datetime, timedelta

from healthstack.extensions import db
from healthstack.models import (
    Exercise,
    FoodLog,
    Meal,
    MealPlan,
    MoodLog,
    ShoppingList,
    ShoppingListItem,
    SleepLog,
    User,
)
from healthstack.utils.auth import hash_password

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@healthstack.com"
DEMO_PASSWORD = "Demo1234"


def seed_demo_data(now: datetime = None) -> User:
    existing = User.query.filter_by(email=DEMO_EMAIL).first()
    if existing:
        logger.info("demo user already present, skipping seed")
        return existing

    now = now or datetime.utcnow()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    yesterday = today - timedelta(days=1)

    user = User(email=DEMO_EMAIL, name="Demo User", password_hash=hash_password(DEMO_PASSWORD))
    db.session.add(user)
    db.session.flush()

    db.session.add_all([
        FoodLog(user_id=user.id, food_name="Oatmeal with berries", calories=350, protein=12, carbs=55,
                fat=8, fiber=10, meal_type="BREAKFAST", serving_size="1 bowl",
                logged_at=today + timedelta(hours=8)),
        FoodLog(user_id=user.id, food_name="Chicken salad", calories=420, protein=35, carbs=15,
                fat=22, fiber=5, meal_type="LUNCH", serving_size="1 portion",
                logged_at=today + timedelta(hours=12, minutes=30)),
        FoodLog(user_id=user.id, food_name="Greek yogurt and nuts", calories=250, protein=15, carbs=18,
                fat=14, fiber=3, meal_type="SNACK", serving_size="150 g yogurt, 30 g nuts",
                logged_at=today + timedelta(hours=15)),
        FoodLog(user_id=user.id, food_name="Salmon and broccoli", calories=480, protein=42, carbs=12,
                fat=28, fiber=4, meal_type="DINNER", serving_size="200 g salmon, 150 g vegetables",
                logged_at=today + timedelta(hours=18)),
    ])

    db.session.add_all([
        Exercise(user_id=user.id, exercise_name="Morning run", exercise_type="CARDIO", duration=30,
                 calories=300, distance=5.0, intensity="MODERATE", logged_at=today + timedelta(hours=7)),
        Exercise(user_id=user.id, exercise_name="Gym session", exercise_type="STRENGTH", duration=45,
                 calories=250, intensity="HIGH", notes="Upper body", logged_at=yesterday + timedelta(hours=17)),
    ])

    sleep = SleepLog(user_id=user.id, sleep_start=yesterday + timedelta(hours=23),
                     sleep_end=today + timedelta(hours=7), quality=8, notes="Slept well")
    sleep.recompute_duration()
    db.session.add(sleep)

    db.session.add_all([
        MoodLog(user_id=user.id, mood=8, energy=7, stress=3, notes="Good morning",
                logged_at=today + timedelta(hours=9)),
        MoodLog(user_id=user.id, mood=7, energy=6, stress=4, logged_at=today + timedelta(hours=15)),
    ])

    plan = MealPlan(user_id=user.id, date=today + timedelta(days=1), diet_type="BALANCED",
                    target_calories=2000, target_protein=120, target_carbs=220, target_fat=70,
                    notes="Balanced day")
    plan.meals = [
        Meal(position=0, meal_type="BREAKFAST", name="Porridge", calories=400, protein=15, carbs=60, fat=10),
        Meal(position=1, meal_type="LUNCH", name="Lentil soup", description="With rye bread",
             calories=550, protein=30, carbs=70, fat=15),
        Meal(position=2, meal_type="DINNER", name="Chicken and rice", calories=650, protein=50, carbs=70, fat=18),
    ]
    db.session.add(plan)

    shopping = ShoppingList(user_id=user.id, name="Weekly groceries")
    shopping.items = [
        ShoppingListItem(name="Oats", quantity="1 kg", category="Grains"),
        ShoppingListItem(name="Salmon", quantity="400 g", category="Fish"),
        ShoppingListItem(name="Broccoli", quantity="2 heads", category="Vegetables", checked=True),
    ]
    db.session.add(shopping)

    db.session.commit()
    logger.info("seeded demo user id=%s", user.id)
    return user
