from typing import Any, Dict, List, Optional, Tuple, Type

from flask import jsonify, request
from marshmallow import Schema, ValidationError


def ok(payload: Dict[str, Any], status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, details: Optional[List[Dict[str, str]]] = None):
    body: Dict[str, Any] = {"error": message, "code": code}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if data is not None:
        return data
    return request.form.to_dict() if request.form else {}


def query_args() -> Dict[str, str]:
    return request.args.to_dict()


def flatten_errors(messages: Any, prefix: str = "") -> List[Dict[str, str]]:
    """Turn marshmallow's nested error messages into a flat list of field/message pairs."""
    details: List[Dict[str, str]] = []
    if isinstance(messages, dict):
        for key, value in messages.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            details.extend(flatten_errors(value, field))
    elif isinstance(messages, (list, tuple)):
        for item in messages:
            if isinstance(item, (dict, list, tuple)):
                details.extend(flatten_errors(item, prefix))
            else:
                details.append({"field": prefix or "_schema", "message": str(item)})
    else:
        details.append({"field": prefix or "_schema", "message": str(messages)})
    return details


def validate_schema(
    schema_cls: Type[Schema], payload: Any, **load_kwargs
) -> Tuple[Optional[Any], Optional[List[Dict[str, str]]]]:
    try:
        return schema_cls().load(payload, **load_kwargs), None
    except ValidationError as exc:
        return None, flatten_errors(exc.messages)
