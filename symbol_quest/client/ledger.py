"""Draw ledger contract shared by the local and remote backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, TYPE_CHECKING

from symbol_quest.models.card import Card, UserContext

if TYPE_CHECKING:
    from symbol_quest.services.card_selector import CardSelector

HISTORY_LIMIT = 30

Clock = Callable[[], datetime]


def day_string(moment: datetime) -> str:
    """Calendar day key of a local datetime (YYYY-MM-DD)."""
    return moment.date().isoformat()


def to_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


@dataclass
class DrawRecord:
    """A persisted draw outcome."""

    card: Card
    context: Optional[UserContext]
    date: str
    timestamp: int
    id: str
    interpretation: Optional[str] = None

    @staticmethod
    def make_id(timestamp: int, card_id: int) -> str:
        return f"{timestamp}-{card_id}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DrawRecord":
        """Parse a stored record.

        Raises KeyError, TypeError, ValueError or OverflowError when malformed.
        """
        card = Card.from_dict(data["card"])
        context_data = data.get("context")
        timestamp = int(data.get("timestamp") or 0)
        return cls(
            card=card,
            context=UserContext.from_dict(context_data) if context_data else None,
            date=str(data["date"]),
            timestamp=timestamp,
            id=str(data.get("id") or cls.make_id(timestamp, card.id)),
            interpretation=data.get("interpretation"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "card": self.card.to_dict(),
            "context": self.context.to_dict() if self.context else None,
            "date": self.date,
            "timestamp": self.timestamp,
            "id": self.id,
        }
        if self.interpretation is not None:
            data["interpretation"] = self.interpretation
        return data


class DrawLedger(ABC):
    """
    Tracks whether the user has drawn today and keeps the draw history.

    State per calendar day is NOT_DRAWN or DRAWN_TODAY. There is no reset:
    a draw stored under an earlier day simply stops matching today's key.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock: Clock = clock or datetime.now

    def today(self) -> str:
        return day_string(self.clock())

    def latest_record(self) -> Optional[DrawRecord]:
        """Most recent draw, None when nothing (readable) is stored."""
        return None

    def has_drawn_today(self) -> bool:
        record = self.latest_record()
        return record is not None and record.date == self.today()

    def get_todays_card(self) -> Optional[Card]:
        if not self.has_drawn_today():
            return None
        record = self.latest_record()
        return record.card if record else None

    @abstractmethod
    def record_draw(
        self,
        card: Card,
        context: Optional[UserContext],
        interpretation: Optional[str] = None,
    ) -> DrawRecord:
        """Store a draw as the most recent one and prepend it to history."""
        ...

    @abstractmethod
    def get_history(self) -> List[DrawRecord]:
        """Past draws, newest first, at most HISTORY_LIMIT entries."""
        ...

    @abstractmethod
    def draw(self, context: UserContext, selector: "CardSelector") -> DrawRecord:
        """Sample a new card for context and record it."""
        ...
