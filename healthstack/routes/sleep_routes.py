from flask import Blueprint
from healthstack.utils.auth import require_auth
from healthstack.controllers.resources import SLEEP_LOGS
from healthstack.controllers.record_controller import (
    list_records_handler,
    create_record_handler,
    get_record_handler,
    update_record_handler,
    delete_record_handler,
)

sleep_bp = Blueprint("sleep_logs", __name__, url_prefix="/api/sleep-logs")

@sleep_bp.get("")
@require_auth
def list_sleep_logs():
    return list_records_handler(SLEEP_LOGS)


@sleep_bp.post("")
@require_auth
def create_sleep_log():
    return create_record_handler(SLEEP_LOGS)


@sleep_bp.get("/<int:record_id>")
@require_auth
def get_sleep_log(record_id):
    return get_record_handler(SLEEP_LOGS, record_id)


@sleep_bp.put("/<int:record_id>")
@require_auth
def update_sleep_log(record_id):
    return update_record_handler(SLEEP_LOGS, record_id)


@sleep_bp.delete("/<int:record_id>")
@require_auth
def delete_sleep_log(record_id):
    return delete_record_handler(SLEEP_LOGS, record_id)
