from flask import Blueprint
from healthstack.utils.auth import require_auth
from healthstack.controllers.resources import MEAL_PLANS
from healthstack.controllers.record_controller import (
    list_records_handler,
    create_record_handler,
    get_record_handler,
    update_record_handler,
    delete_record_handler,
)

meal_plan_bp = Blueprint("meal_plans", __name__, url_prefix="/api/meal-plans")

@meal_plan_bp.get("")
@require_auth
def list_meal_plans():
    return list_records_handler(MEAL_PLANS)


@meal_plan_bp.post("")
@require_auth
def create_meal_plan():
    return create_record_handler(MEAL_PLANS)


@meal_plan_bp.get("/<int:record_id>")
@require_auth
def get_meal_plan(record_id):
    return get_record_handler(MEAL_PLANS, record_id)


@meal_plan_bp.put("/<int:record_id>")
@require_auth
def update_meal_plan(record_id):
    return update_record_handler(MEAL_PLANS, record_id)


@meal_plan_bp.delete("/<int:record_id>")
@require_auth
def delete_meal_plan(record_id):
    return delete_record_handler(MEAL_PLANS, record_id)
