from marshmallow import EXCLUDE, Schema, fields, validate

from healthstack.schemas.fields import UTCDateTime

SCORE = validate.Range(min=1, max=10)


class CreateMoodLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    mood = fields.Int(required=True, strict=True, validate=SCORE)
    energy = fields.Int(allow_none=True, strict=True, validate=SCORE)
    stress = fields.Int(allow_none=True, strict=True, validate=SCORE)
    notes = fields.Str(allow_none=True)
    logged_at = UTCDateTime(data_key="loggedAt")


UpdateMoodLogSchema = CreateMoodLogSchema
