"""Tests for draw request schemas."""
from datetime import date

import pytest
from marshmallow import ValidationError

from symbol_quest.schemas.auth_schemas import RegisterRequestSchema
from symbol_quest.schemas.draw_schemas import (
    DailyDrawRequestSchema,
    EnhancedInterpretationRequestSchema,
    HistoryQuerySchema,
)


class TestDailyDrawRequestSchema:
    def test_valid(self):
        data = DailyDrawRequestSchema().load(
            {"mood": "curious", "question": "What now?", "extra": "ignored"}
        )

        assert data == {"mood": "curious", "question": "What now?"}

    @pytest.mark.parametrize(
        "body, field",
        [
            ({"question": "What now?"}, "mood"),
            ({"mood": "sleepy", "question": "What now?"}, "mood"),
            ({"mood": "curious", "question": ""}, "question"),
            ({"mood": "curious", "question": "x" * 1001}, "question"),
        ],
    )
    def test_invalid(self, body, field):
        with pytest.raises(ValidationError) as exc_info:
            DailyDrawRequestSchema().load(body)

        assert field in exc_info.value.messages


class TestHistoryQuerySchema:
    def test_default_limit(self):
        assert HistoryQuerySchema().load({}) == {"limit": 20}

    def test_limit_range(self):
        with pytest.raises(ValidationError):
            HistoryQuerySchema().load({"limit": 101})


class TestEnhancedInterpretationRequestSchema:
    def test_defaults(self):
        data = EnhancedInterpretationRequestSchema().load({"card_id": 17})

        assert data == {"card_id": 17, "mood": "", "question": "", "draw_date": None}

    def test_parses_draw_date(self):
        data = EnhancedInterpretationRequestSchema().load(
            {"card_id": 0, "draw_date": "2024-05-01"}
        )

        assert data["draw_date"] == date(2024, 5, 1)


class TestRegisterRequestSchema:
    def test_email_normalized(self):
        data = RegisterRequestSchema().load(
            {"email": "Seeker@Example.com", "password": "password123"}
        )

        assert data["email"] == "seeker@example.com"
