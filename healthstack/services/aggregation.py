"""
Aggregation Routines

Pure folds over the records returned by a list query. Missing optional
values count as 0 in sums; averages over optional fields only divide by the
number of records that supplied the field. No rounding is applied.
"""

from typing import Any, Dict, Iterable, Sequence


def _sum(records: Iterable[Any], attr: str) -> float:
    return float(sum((getattr(record, attr) or 0) for record in records))


def _mean_of_present(records: Iterable[Any], attr: str) -> float:
    values = [value for value in (getattr(record, attr) for record in records) if value is not None]
    if not values:
        return 0.0
    return float(sum(values)) / len(values)


def food_log_totals(logs: Sequence[Any]) -> Dict[str, float]:
    return {
        "calories": _sum(logs, "calories"),
        "protein": _sum(logs, "protein"),
        "carbs": _sum(logs, "carbs"),
        "fat": _sum(logs, "fat"),
        "fiber": _sum(logs, "fiber"),
    }


def exercise_totals(exercises: Sequence[Any]) -> Dict[str, float]:
    return {
        "totalExercises": len(exercises),
        "totalDuration": _sum(exercises, "duration"),
        "totalCalories": _sum(exercises, "calories"),
        "totalDistance": _sum(exercises, "distance"),
    }


def sleep_totals(logs: Sequence[Any]) -> Dict[str, float]:
    total_logs = len(logs)
    return {
        "totalLogs": total_logs,
        "totalDuration": _sum(logs, "duration"),
        "averageQuality": _sum(logs, "quality") / total_logs if total_logs else 0.0,
    }


def mood_totals(logs: Sequence[Any]) -> Dict[str, float]:
    total_logs = len(logs)
    return {
        "totalLogs": total_logs,
        # mood is required, so its mean is over every record
        "averageMood": _sum(logs, "mood") / total_logs if total_logs else 0.0,
        "averageEnergy": _mean_of_present(logs, "energy"),
        "averageStress": _mean_of_present(logs, "stress"),
    }
