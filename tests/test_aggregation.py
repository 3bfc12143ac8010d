from types import SimpleNamespace

from healthstack.services.aggregation import exercise_totals, food_log_totals, mood_totals, sleep_totals


def rec(**kwargs):
    return SimpleNamespace(**kwargs)


def test_food_totals_missing_is_zero():
    logs = [
        rec(calories=100, protein=10, carbs=None, fat=1.5, fiber=None),
        rec(calories=250.5, protein=None, carbs=30, fat=None, fiber=2),
    ]
    assert food_log_totals(logs) == {
        "calories": 350.5, "protein": 10.0, "carbs": 30.0, "fat": 1.5, "fiber": 2.0
    }


def test_food_totals_empty():
    assert food_log_totals([]) == {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0, "fiber": 0.0}


def test_exercise_totals():
    exercises = [rec(duration=30, calories=300, distance=5), rec(duration=15.5, calories=None, distance=None)]
    assert exercise_totals(exercises) == {
        "totalExercises": 2, "totalDuration": 45.5, "totalCalories": 300.0, "totalDistance": 5.0
    }


def test_sleep_totals_are_not_rounded():
    logs = [rec(duration=7.25, quality=7), rec(duration=6.5, quality=8), rec(duration=8, quality=8)]
    totals = sleep_totals(logs)
    assert totals["totalLogs"] == 3
    assert totals["totalDuration"] == 21.75
    assert totals["averageQuality"] == 23 / 3


def test_sleep_totals_empty():
    assert sleep_totals([]) == {"totalLogs": 0, "totalDuration": 0.0, "averageQuality": 0.0}


def test_mood_totals_divide_by_present_count():
    logs = [rec(mood=9, energy=None, stress=2), rec(mood=3, energy=4, stress=None), rec(mood=6, energy=None, stress=None)]
    assert mood_totals(logs) == {
        "totalLogs": 3, "averageMood": 6.0, "averageEnergy": 4.0, "averageStress": 2.0
    }


def test_mood_totals_empty():
    assert mood_totals([]) == {"totalLogs": 0, "averageMood": 0.0, "averageEnergy": 0.0, "averageStress": 0.0}
