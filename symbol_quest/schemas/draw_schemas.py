"""Draw and interpretation request schemas."""
from marshmallow import EXCLUDE, Schema, fields, validate

from symbol_quest.models.enums import Mood


class DailyDrawRequestSchema(Schema):
    """POST /draws/daily body."""

    class Meta:
        unknown = EXCLUDE

    mood = fields.String(
        required=True,
        validate=validate.OneOf(Mood.values()),
    )
    question = fields.String(required=True, validate=validate.Length(min=1, max=1000))


class HistoryQuerySchema(Schema):
    """GET /draws/history query string."""

    class Meta:
        unknown = EXCLUDE

    limit = fields.Integer(load_default=20, validate=validate.Range(min=1, max=100))


class EnhancedInterpretationRequestSchema(Schema):
    """POST /interpretations/enhanced body."""

    class Meta:
        unknown = EXCLUDE

    card_id = fields.Integer(required=True, validate=validate.Range(min=0, max=21))
    mood = fields.String(load_default="")
    question = fields.String(load_default="")
    draw_date = fields.Date(load_default=None, allow_none=True)
