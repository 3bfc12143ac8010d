from marshmallow import EXCLUDE, Schema, fields, validate

from healthstack.schemas.fields import UTCDateTime
from healthstack.utils.enums import ExerciseType, Intensity


class CreateExerciseSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    exercise_name = fields.Str(required=True, data_key="exerciseName", validate=validate.Length(min=1, error="Exercise name is required"))
    exercise_type = fields.Str(required=True, data_key="exerciseType", validate=validate.OneOf([e.value for e in ExerciseType]))
    duration = fields.Float(required=True, validate=validate.Range(min=1, error="Duration must be at least 1 minute"))
    calories = fields.Float(allow_none=True, validate=validate.Range(min=0))
    distance = fields.Float(allow_none=True, validate=validate.Range(min=0))
    intensity = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in Intensity]))
    notes = fields.Str(allow_none=True)
    logged_at = UTCDateTime(data_key="loggedAt")


UpdateExerciseSchema = CreateExerciseSchema
