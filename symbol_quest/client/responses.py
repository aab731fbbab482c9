"""Typed views of draw service responses.

Every parser tolerates missing keys and wrong container types so an
unexpected payload degrades to defaults instead of raising.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class CardRef:
    """Card reference returned by today status."""

    id: int
    name: str = ""
    traditional_meaning: str = ""

    @classmethod
    def from_payload(cls, data: Any) -> Optional["CardRef"]:
        data = _mapping(data)
        card_id = data.get("id", data.get("card_id"))
        if card_id is None:
            return None
        return cls(
            id=_int(card_id),
            name=_str(data.get("name", data.get("card_name"))),
            traditional_meaning=_str(data.get("traditional_meaning")),
        )


@dataclass
class TodayStatus:
    """GET /draws/today."""

    has_drawn: bool = False
    can_draw: bool = True
    card: Optional[CardRef] = None
    draws_today: int = 0
    limit: int = 1

    @classmethod
    def from_payload(cls, data: Any) -> "TodayStatus":
        data = _mapping(data)
        return cls(
            has_drawn=bool(data.get("has_drawn", False)),
            can_draw=bool(data.get("can_draw", True)),
            card=CardRef.from_payload(data.get("card")),
            draws_today=_int(data.get("draws_today")),
            limit=_int(data.get("limit"), 1),
        )


@dataclass
class RemoteDraw:
    """A draw as stored by the service."""

    card_id: int
    card_name: str = ""
    number: str = ""
    draw_date: str = ""
    interpretation_basic: str = ""
    interpretation_enhanced: str = ""
    mood: str = ""
    question: str = ""
    created_at: str = ""

    @classmethod
    def from_payload(cls, data: Any) -> Optional["RemoteDraw"]:
        data = _mapping(data)
        if data.get("card_id") is None:
            return None
        return cls(
            card_id=_int(data.get("card_id")),
            card_name=_str(data.get("card_name")),
            number=_str(data.get("number")),
            draw_date=_str(data.get("draw_date")),
            interpretation_basic=_str(data.get("interpretation_basic")),
            interpretation_enhanced=_str(data.get("interpretation_enhanced")),
            mood=_str(data.get("mood")),
            question=_str(data.get("question")),
            created_at=_str(data.get("created_at")),
        )


@dataclass
class DailyDrawResult:
    """POST /draws/daily."""

    success: bool = False
    card: Optional[RemoteDraw] = None

    @classmethod
    def from_payload(cls, data: Any) -> "DailyDrawResult":
        data = _mapping(data)
        return cls(
            success=bool(data.get("success", False)),
            card=RemoteDraw.from_payload(data.get("card")),
        )


@dataclass
class DrawHistory:
    """GET /draws/history."""

    draws: List[RemoteDraw] = field(default_factory=list)
    count: int = 0

    @classmethod
    def from_payload(cls, data: Any) -> "DrawHistory":
        data = _mapping(data)
        raw_draws = data.get("draws")
        draws = []
        if isinstance(raw_draws, list):
            draws = [d for d in (RemoteDraw.from_payload(item) for item in raw_draws) if d]
        return cls(draws=draws, count=_int(data.get("count"), len(draws)))


@dataclass
class AuthResult:
    """POST /auth/register and /auth/login."""

    token: str = ""
    user_id: str = ""
    email: str = ""
    subscription_tier: str = "free"

    @classmethod
    def from_payload(cls, data: Any) -> "AuthResult":
        data = _mapping(data)
        user = _mapping(data.get("user"))
        return cls(
            token=_str(data.get("token")),
            user_id=_str(user.get("id")),
            email=_str(user.get("email")),
            subscription_tier=_str(user.get("subscription_tier")) or "free",
        )
