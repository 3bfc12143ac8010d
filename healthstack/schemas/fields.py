from marshmallow import fields

from healthstack.utils.dates import parse_datetime


class UTCDateTime(fields.Field):
    """ISO-8601 timestamp or bare date, loaded as a naive UTC datetime."""

    default_error_messages = {"invalid": "Not a valid ISO-8601 datetime."}

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error("invalid")
        try:
            return parse_datetime(value)
        except ValueError as exc:
            raise self.make_error("invalid") from exc
