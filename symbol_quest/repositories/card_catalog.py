"""Read-only access to the major arcana deck dataset."""
import json
import os
from functools import lru_cache
from typing import Dict, Iterator, List, Optional

from symbol_quest.models.card import Card

DECK_SIZE = 22
DEFAULT_DECK_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "major_arcana.json",
)


class CatalogError(Exception):
    """Raised when the deck dataset is missing or malformed."""
    pass


class CardCatalog:
    """Immutable, id-ordered collection of the 22 major arcana cards."""

    def __init__(self, cards: List[Card]):
        ids = [card.id for card in cards]
        if len(cards) != DECK_SIZE:
            raise CatalogError(f"Deck must contain {DECK_SIZE} cards, found {len(cards)}")
        if len(set(ids)) != len(ids):
            raise CatalogError("Deck contains duplicate card ids")

        self._cards = tuple(sorted(cards, key=lambda c: c.id))
        self._by_id: Dict[int, Card] = {card.id: card for card in self._cards}

    @classmethod
    def from_file(cls, path: str = DEFAULT_DECK_PATH) -> "CardCatalog":
        """Load the catalog from a JSON file with a top-level "cards" list."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot load deck from {path}: {e}")

        try:
            cards = [Card.from_dict(entry) for entry in data["cards"]]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed deck entry in {path}: {e}")

        return cls(cards)

    def all(self) -> List[Card]:
        """All cards ordered by id."""
        return list(self._cards)

    def get(self, card_id: int) -> Optional[Card]:
        """Get card by id, None if unknown."""
        return self._by_id.get(card_id)

    def get_by_name(self, name: str) -> Optional[Card]:
        """Get card by exact name (case-insensitive)."""
        lowered = name.strip().lower()
        for card in self._cards:
            if card.name.lower() == lowered:
                return card
        return None

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id


@lru_cache(maxsize=1)
def get_catalog() -> CardCatalog:
    """Deck bundled with the package, loaded once per process."""
    return CardCatalog.from_file()
