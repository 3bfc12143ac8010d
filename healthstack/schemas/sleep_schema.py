from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema

from healthstack.schemas.fields import UTCDateTime

SCORE = validate.Range(min=1, max=10)


class CreateSleepLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    sleep_start = UTCDateTime(required=True, data_key="sleepStart")
    sleep_end = UTCDateTime(required=True, data_key="sleepEnd")
    quality = fields.Int(required=True, strict=True, validate=SCORE)
    notes = fields.Str(allow_none=True)

    @validates_schema
    def validate_window(self, data, **kwargs):
        start, end = data.get("sleep_start"), data.get("sleep_end")
        if start is not None and end is not None and end <= start:
            raise ValidationError("sleepEnd must be after sleepStart", field_name="sleepEnd")


UpdateSleepLogSchema = CreateSleepLogSchema
