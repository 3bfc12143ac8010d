from .user import User
from .food_log import FoodLog
from .exercise import Exercise
from .sleep_log import SleepLog
from .mood_log import MoodLog
from .meal_plan import MealPlan, Meal
from .shopping_list import ShoppingList, ShoppingListItem

__all__ = [
    "User",
    "FoodLog",
    "Exercise",
    "SleepLog",
    "MoodLog",
    "MealPlan",
    "Meal",
    "ShoppingList",
    "ShoppingListItem",
]
