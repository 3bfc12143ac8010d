from healthstack.models.exercise import Exercise
from healthstack.models.food_log import FoodLog
from healthstack.models.mood_log import MoodLog
from healthstack.models.sleep_log import SleepLog
from healthstack.services.repository import RecordRepository, SleepLogRepository

food_logs = RecordRepository(FoodLog, timestamp_field="logged_at", category_field="meal_type")
exercises = RecordRepository(Exercise, timestamp_field="logged_at", category_field="exercise_type")
sleep_logs = SleepLogRepository(SleepLog, timestamp_field="sleep_start", default_timestamp=False)
mood_logs = RecordRepository(MoodLog, timestamp_field="logged_at")
