"""
Record Controller Module

One set of request handlers shared by every owner-scoped log resource
(food logs, exercises, sleep logs, mood logs, meal plans). Each handler:
validates input at the boundary, calls the resource's repository with the
authenticated user id, and shapes the JSON response.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Type

from flask import request
from marshmallow import Schema

from healthstack.errors import NotFoundError, ValidationError
from healthstack.services.repository import InvalidRecord, RecordRepository
from healthstack.utils.http import json_body, ok, query_args, validate_schema


@dataclass(frozen=True)
class RecordResource:
    repository: RecordRepository
    create_schema: Type[Schema]
    update_schema: Type[Schema]
    query_schema: Type[Schema]
    item_key: str
    collection_key: str
    label: str
    summarize: Optional[Callable[[Sequence[Any]], Dict[str, Any]]] = None
    # Meal plans validate nested meals in full, so they load without partial
    partial_update: bool = True


def _load(schema_cls: Type[Schema], payload: Any, **load_kwargs):
    data, errors = validate_schema(schema_cls, payload, **load_kwargs)
    if errors:
        raise ValidationError("Validation failed", details=errors)
    return data


def _invalid(exc: InvalidRecord) -> ValidationError:
    return ValidationError("Validation failed", details=[{"field": exc.field, "message": exc.message}])


def _not_found(resource: RecordResource) -> NotFoundError:
    return NotFoundError(f"{resource.label} not found")


def list_records_handler(resource: RecordResource):
    record_filter = _load(resource.query_schema, query_args())
    records = resource.repository.list(request.user_id, record_filter)
    payload: Dict[str, Any] = {
        resource.collection_key: [record.to_dict() for record in records],
        "count": len(records),
    }
    if resource.summarize is not None:
        payload["totals"] = resource.summarize(records)
    return ok(payload)


def create_record_handler(resource: RecordResource):
    data = _load(resource.create_schema, json_body())
    try:
        record = resource.repository.create(request.user_id, data)
    except InvalidRecord as exc:
        raise _invalid(exc) from exc
    return ok({
        "message": f"{resource.label} created successfully",
        resource.item_key: record.to_dict(),
    }, 201)


def get_record_handler(resource: RecordResource, record_id: int):
    record = resource.repository.get(request.user_id, record_id)
    if record is None:
        raise _not_found(resource)
    return ok({resource.item_key: record.to_dict()})


def update_record_handler(resource: RecordResource, record_id: int):
    # Ownership is checked before the body so foreign ids never leak validation detail
    if resource.repository.get(request.user_id, record_id) is None:
        raise _not_found(resource)
    data = _load(resource.update_schema, json_body(), partial=resource.partial_update)
    try:
        record = resource.repository.update(request.user_id, record_id, data)
    except InvalidRecord as exc:
        raise _invalid(exc) from exc
    if record is None:
        raise _not_found(resource)
    return ok({
        "message": f"{resource.label} updated successfully",
        resource.item_key: record.to_dict(),
    })


def delete_record_handler(resource: RecordResource, record_id: int):
    if not resource.repository.delete(request.user_id, record_id):
        raise _not_found(resource)
    return ok({"message": f"{resource.label} deleted successfully"})
