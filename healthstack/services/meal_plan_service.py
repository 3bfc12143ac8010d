"""
Meal Plan Service

Meal plans own an ordered list of meals. Creating a plan with meals and
replacing a plan's meals each happen in a single transaction.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import selectinload

from healthstack.extensions import db
from healthstack.models.meal_plan import Meal, MealPlan
from healthstack.services.repository import RecordRepository

logger = logging.getLogger(__name__)


def build_meals(meals: List[Dict[str, Any]]) -> List[Meal]:
    return [Meal(position=index, **fields) for index, fields in enumerate(meals)]


class MealPlanRepository(RecordRepository):
    def __init__(self):
        super().__init__(
            MealPlan,
            timestamp_field="date",
            category_field="diet_type",
            default_timestamp=False,
            query_options=(selectinload(MealPlan.meals),),
        )

    def create(self, user_id: int, fields: Dict[str, Any]) -> MealPlan:
        fields = dict(fields)
        meals = fields.pop("meals", None) or []
        plan = MealPlan(user_id=user_id)
        self.apply_fields(plan, fields)
        plan.user_id = user_id
        plan.meals = build_meals(meals)
        db.session.add(plan)
        # Plan and meals commit together or not at all
        self._commit()
        logger.info("created meal plan id=%s with %d meals user=%s", plan.id, len(plan.meals), user_id)
        return plan

    def update(self, user_id: int, record_id: int, fields: Dict[str, Any]):
        """
        Merge plan fields. When ``meals`` is present (even empty) every
        existing meal is deleted and the supplied ones inserted; when absent
        the meals are left untouched.
        """
        plan = self.get(user_id, record_id)
        if plan is None:
            return None
        fields = dict(fields)
        replace_meals = "meals" in fields
        meals = fields.pop("meals", None) or []
        self.apply_fields(plan, fields)
        if replace_meals:
            plan.meals.clear()
            db.session.flush()
            plan.meals.extend(build_meals(meals))
        self._commit()
        if replace_meals:
            logger.info("replaced meals of meal plan id=%s with %d meals", plan.id, len(plan.meals))
        return plan


meal_plans = MealPlanRepository()
