"""Mood- and question-weighted card selection used by the client."""
import logging
import random
from typing import List, Optional, Tuple

from symbol_quest.models.card import Card, UserContext
from symbol_quest.repositories.card_catalog import CardCatalog
from symbol_quest.services.relevance import (
    DEFAULT_SEMANTIC_WEIGHT,
    calculate_question_relevance,
)
from symbol_quest.services.sampler import weighted_choice

logger = logging.getLogger(__name__)

DEFAULT_JITTER_RANGE = (0.7, 1.3)


class CardSelector:
    """
    Picks one card for a user context.

    Each card's weight is its mood weight times the question relevance,
    then scaled by a jitter factor drawn fresh per card per call so the
    top-scoring card is likely but never certain.
    """

    def __init__(
        self,
        catalog: CardCatalog,
        rng: Optional[random.Random] = None,
        jitter_range: Tuple[float, float] = DEFAULT_JITTER_RANGE,
        semantic_weight: float = DEFAULT_SEMANTIC_WEIGHT,
    ):
        low, high = jitter_range
        if low <= 0 or high < low:
            raise ValueError(f"Invalid jitter range: {jitter_range}")

        self.catalog = catalog
        self.rng = rng or random.Random()
        self.jitter_range = (low, high)
        self.semantic_weight = semantic_weight

    def base_weight(self, card: Card, context: UserContext) -> float:
        """Mood weight times question relevance, before jitter."""
        relevance = calculate_question_relevance(
            context.question or "",
            card.keywords,
            self.semantic_weight,
        )
        return card.mood_weight(context.mood) * relevance

    def base_weights(self, context: UserContext) -> List[Tuple[Card, float]]:
        """(card, base weight) for the whole catalog in id order."""
        return [(card, self.base_weight(card, context)) for card in self.catalog]

    def rank(self, context: UserContext) -> List[Tuple[Card, float]]:
        """Catalog sorted by base weight, highest first."""
        return sorted(self.base_weights(context), key=lambda pair: pair[1], reverse=True)

    def _jitter(self) -> float:
        low, high = self.jitter_range
        return low + self.rng.random() * (high - low)

    def select_card(self, context: UserContext) -> Card:
        """Sample one card for the context. Never raises for odd input."""
        weighted = [
            (card, weight * self._jitter())
            for card, weight in self.base_weights(context)
        ]
        card = weighted_choice(weighted, self.rng)
        logger.debug(f"Selected {card.name} for mood '{context.mood}'")
        return card
