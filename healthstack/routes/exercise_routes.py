from flask import Blueprint
from healthstack.utils.auth import require_auth
from healthstack.controllers.resources import EXERCISES
from healthstack.controllers.record_controller import (
    list_records_handler,
    create_record_handler,
    get_record_handler,
    update_record_handler,
    delete_record_handler,
)

exercise_bp = Blueprint("exercises", __name__, url_prefix="/api/exercises")

@exercise_bp.get("")
@require_auth
def list_exercises():
    return list_records_handler(EXERCISES)


@exercise_bp.post("")
@require_auth
def create_exercise():
    return create_record_handler(EXERCISES)


@exercise_bp.get("/<int:record_id>")
@require_auth
def get_exercise(record_id):
    return get_record_handler(EXERCISES, record_id)


@exercise_bp.put("/<int:record_id>")
@require_auth
def update_exercise(record_id):
    return update_record_handler(EXERCISES, record_id)


@exercise_bp.delete("/<int:record_id>")
@require_auth
def delete_exercise(record_id):
    return delete_record_handler(EXERCISES, record_id)
