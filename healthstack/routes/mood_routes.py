from flask import Blueprint
from healthstack.utils.auth import require_auth
from healthstack.controllers.resources import MOOD_LOGS
from healthstack.controllers.record_controller import (
    list_records_handler,
    create_record_handler,
    get_record_handler,
    update_record_handler,
    delete_record_handler,
)

mood_bp = Blueprint("mood_logs", __name__, url_prefix="/api/mood-logs")

@mood_bp.get("")
@require_auth
def list_mood_logs():
    return list_records_handler(MOOD_LOGS)


@mood_bp.post("")
@require_auth
def create_mood_log():
    return create_record_handler(MOOD_LOGS)


@mood_bp.get("/<int:record_id>")
@require_auth
def get_mood_log(record_id):
    return get_record_handler(MOOD_LOGS, record_id)


@mood_bp.put("/<int:record_id>")
@require_auth
def update_mood_log(record_id):
    return update_record_handler(MOOD_LOGS, record_id)


@mood_bp.delete("/<int:record_id>")
@require_auth
def delete_mood_log(record_id):
    return delete_record_handler(MOOD_LOGS, record_id)
