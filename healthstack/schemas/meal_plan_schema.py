from marshmallow import EXCLUDE, Schema, fields, validate

from healthstack.schemas.fields import UTCDateTime
from healthstack.utils.enums import DietType, MealType

POSITIVE = validate.Range(min=0, min_inclusive=False)


class MealSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    meal_type = fields.Str(required=True, data_key="mealType", validate=validate.OneOf([e.value for e in MealType]))
    name = fields.Str(required=True, validate=validate.Length(min=1))
    description = fields.Str(allow_none=True)
    calories = fields.Float(allow_none=True, validate=POSITIVE)
    protein = fields.Float(allow_none=True, validate=POSITIVE)
    carbs = fields.Float(allow_none=True, validate=POSITIVE)
    fat = fields.Float(allow_none=True, validate=POSITIVE)


class CreateMealPlanSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = UTCDateTime(required=True)
    diet_type = fields.Str(allow_none=True, data_key="dietType", validate=validate.OneOf([e.value for e in DietType]))
    target_calories = fields.Float(allow_none=True, data_key="targetCalories", validate=POSITIVE)
    target_protein = fields.Float(allow_none=True, data_key="targetProtein", validate=POSITIVE)
    target_carbs = fields.Float(allow_none=True, data_key="targetCarbs", validate=POSITIVE)
    target_fat = fields.Float(allow_none=True, data_key="targetFat", validate=POSITIVE)
    notes = fields.Str(allow_none=True)
    meals = fields.List(fields.Nested(MealSchema))


class UpdateMealPlanSchema(CreateMealPlanSchema):
    # Loaded without partial=True so nested meals keep their required fields
    date = UTCDateTime()
