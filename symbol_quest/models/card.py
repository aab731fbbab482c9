"""Card and user context value objects."""
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_MOOD_WEIGHT = 1.0


def _str_tuple(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class Card:
    """
    One entry of the 22-card major arcana catalog.

    Persisted draws only keep `id` and `name`, so ids must stay stable
    across catalog edits.
    """

    id: int
    name: str
    number: str = ""
    keywords: Tuple[str, ...] = ()
    archetypes: Tuple[str, ...] = ()
    elements: Tuple[str, ...] = ()
    astrology: str = ""
    traditional_meaning: str = ""
    light_aspects: Tuple[str, ...] = ()
    shadow_aspects: Tuple[str, ...] = ()
    imagery_description: str = ""
    colors: Tuple[str, ...] = ()
    symbols: Tuple[str, ...] = ()
    mood_weights: Mapping[str, float] = field(default_factory=dict, hash=False)

    def mood_weight(self, mood: Optional[str]) -> float:
        """Weight multiplier for a mood, 1.0 for unknown or empty moods."""
        if not mood:
            return DEFAULT_MOOD_WEIGHT
        return float(self.mood_weights.get(mood, DEFAULT_MOOD_WEIGHT))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Card":
        """Build a Card from a mapping, defaulting every missing field."""
        weights = data.get("mood_weights") or {}
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            number=str(data.get("number") or ""),
            keywords=_str_tuple(data.get("keywords")),
            archetypes=_str_tuple(data.get("archetypes")),
            elements=_str_tuple(data.get("elements")),
            astrology=str(data.get("astrology") or ""),
            traditional_meaning=str(data.get("traditional_meaning") or ""),
            light_aspects=_str_tuple(data.get("light_aspects")),
            shadow_aspects=_str_tuple(data.get("shadow_aspects")),
            imagery_description=str(data.get("imagery_description") or ""),
            colors=_str_tuple(data.get("colors")),
            symbols=_str_tuple(data.get("symbols")),
            mood_weights={str(k): float(v) for k, v in weights.items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Card to dictionary for storage and API responses."""
        return {
            "id": self.id,
            "name": self.name,
            "number": self.number,
            "keywords": list(self.keywords),
            "archetypes": list(self.archetypes),
            "elements": list(self.elements),
            "astrology": self.astrology,
            "traditional_meaning": self.traditional_meaning,
            "light_aspects": list(self.light_aspects),
            "shadow_aspects": list(self.shadow_aspects),
            "imagery_description": self.imagery_description,
            "colors": list(self.colors),
            "symbols": list(self.symbols),
            "mood_weights": dict(self.mood_weights),
        }

    def __repr__(self) -> str:
        return f"<Card(id={self.id}, name='{self.name}')>"


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class UserContext:
    """Mood and question a user supplies for a draw."""

    mood: str
    question: str
    timestamp: int = field(default_factory=now_ms)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserContext":
        return cls(
            mood=str(data.get("mood") or ""),
            question=str(data.get("question") or ""),
            timestamp=int(data.get("timestamp") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mood": self.mood,
            "question": self.question,
            "timestamp": self.timestamp,
        }
