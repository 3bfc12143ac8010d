from healthstack.controllers.record_controller import RecordResource
from healthstack.schemas.exercise_schema import CreateExerciseSchema, UpdateExerciseSchema
from healthstack.schemas.food_schema import CreateFoodLogSchema, UpdateFoodLogSchema
from healthstack.schemas.meal_plan_schema import CreateMealPlanSchema, UpdateMealPlanSchema
from healthstack.schemas.mood_schema import CreateMoodLogSchema, UpdateMoodLogSchema
from healthstack.schemas.query_schema import (
    ExerciseQuerySchema,
    FoodLogQuerySchema,
    MealPlanQuerySchema,
    RecordQuerySchema,
)
from healthstack.schemas.sleep_schema import CreateSleepLogSchema, UpdateSleepLogSchema
from healthstack.services import aggregation
from healthstack.services.meal_plan_service import meal_plans
from healthstack.services.records import exercises, food_logs, mood_logs, sleep_logs

FOOD_LOGS = RecordResource(
    repository=food_logs,
    create_schema=CreateFoodLogSchema,
    update_schema=UpdateFoodLogSchema,
    query_schema=FoodLogQuerySchema,
    item_key="foodLog",
    collection_key="foodLogs",
    label="Food log",
    summarize=aggregation.food_log_totals,
)

EXERCISES = RecordResource(
    repository=exercises,
    create_schema=CreateExerciseSchema,
    update_schema=UpdateExerciseSchema,
    query_schema=ExerciseQuerySchema,
    item_key="exercise",
    collection_key="exercises",
    label="Exercise",
    summarize=aggregation.exercise_totals,
)

SLEEP_LOGS = RecordResource(
    repository=sleep_logs,
    create_schema=CreateSleepLogSchema,
    update_schema=UpdateSleepLogSchema,
    query_schema=RecordQuerySchema,
    item_key="sleepLog",
    collection_key="sleepLogs",
    label="Sleep log",
    summarize=aggregation.sleep_totals,
)

MOOD_LOGS = RecordResource(
    repository=mood_logs,
    create_schema=CreateMoodLogSchema,
    update_schema=UpdateMoodLogSchema,
    query_schema=RecordQuerySchema,
    item_key="moodLog",
    collection_key="moodLogs",
    label="Mood log",
    summarize=aggregation.mood_totals,
)

MEAL_PLANS = RecordResource(
    repository=meal_plans,
    create_schema=CreateMealPlanSchema,
    update_schema=UpdateMealPlanSchema,
    query_schema=MealPlanQuerySchema,
    item_key="mealPlan",
    collection_key="mealPlans",
    label="Meal plan",
    partial_update=False,
)
