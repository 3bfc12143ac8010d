from marshmallow import EXCLUDE, Schema, fields, validate

from healthstack.schemas.fields import UTCDateTime
from healthstack.utils.enums import MealType

NON_NEGATIVE = validate.Range(min=0)


class CreateFoodLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_name = fields.Str(required=True, data_key="foodName", validate=validate.Length(min=1, error="Food name is required"))
    calories = fields.Float(required=True, validate=validate.Range(min=0, error="Calories must be a positive number"))
    protein = fields.Float(allow_none=True, validate=NON_NEGATIVE)
    carbs = fields.Float(allow_none=True, validate=NON_NEGATIVE)
    fat = fields.Float(allow_none=True, validate=NON_NEGATIVE)
    fiber = fields.Float(allow_none=True, validate=NON_NEGATIVE)
    meal_type = fields.Str(required=True, data_key="mealType", validate=validate.OneOf([e.value for e in MealType]))
    serving_size = fields.Str(allow_none=True, data_key="servingSize")
    notes = fields.Str(allow_none=True)
    logged_at = UTCDateTime(data_key="loggedAt")


# Loaded with partial=True
UpdateFoodLogSchema = CreateFoodLogSchema
