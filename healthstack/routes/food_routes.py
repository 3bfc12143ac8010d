from flask import Blueprint
from healthstack.utils.auth import require_auth
from healthstack.controllers.resources import FOOD_LOGS
from healthstack.controllers.record_controller import (
    list_records_handler,
    create_record_handler,
    get_record_handler,
    update_record_handler,
    delete_record_handler,
)

food_bp = Blueprint("food_logs", __name__, url_prefix="/api/food-logs")

@food_bp.get("")
@require_auth
def list_food_logs():
    return list_records_handler(FOOD_LOGS)


@food_bp.post("")
@require_auth
def create_food_log():
    return create_record_handler(FOOD_LOGS)


@food_bp.get("/<int:record_id>")
@require_auth
def get_food_log(record_id):
    return get_record_handler(FOOD_LOGS, record_id)


@food_bp.put("/<int:record_id>")
@require_auth
def update_food_log(record_id):
    return update_record_handler(FOOD_LOGS, record_id)


@food_bp.delete("/<int:record_id>")
@require_auth
def delete_food_log(record_id):
    return delete_record_handler(FOOD_LOGS, record_id)
