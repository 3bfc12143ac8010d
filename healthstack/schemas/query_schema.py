from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate

from healthstack.services.filters import RecordFilter
from healthstack.utils.dates import parse_range_boundary
from healthstack.utils.enums import DietType, ExerciseType, MealType


def _boundary(value, field_name, end=False):
    if not value:
        return None
    try:
        return parse_range_boundary(value, end=end)
    except ValueError as exc:
        raise ValidationError("Not a valid date or datetime.", field_name=field_name) from exc


class RecordQuerySchema(Schema):
    """Query string of a list endpoint, loaded into a RecordFilter."""

    class Meta:
        unknown = EXCLUDE

    start_date = fields.Str(data_key="startDate", load_default=None)
    end_date = fields.Str(data_key="endDate", load_default=None)

    @post_load
    def make_filter(self, data, **kwargs):
        return RecordFilter(
            start=_boundary(data.get("start_date"), "startDate"),
            end=_boundary(data.get("end_date"), "endDate", end=True),
            category=data.get("category") or None,
        )


class FoodLogQuerySchema(RecordQuerySchema):
    category = fields.Str(data_key="mealType", load_default=None, validate=validate.OneOf([e.value for e in MealType] + [""]))


class ExerciseQuerySchema(RecordQuerySchema):
    category = fields.Str(data_key="exerciseType", load_default=None, validate=validate.OneOf([e.value for e in ExerciseType] + [""]))


class MealPlanQuerySchema(RecordQuerySchema):
    category = fields.Str(data_key="dietType", load_default=None, validate=validate.OneOf([e.value for e in DietType] + [""]))
