"""Card selection used by the remote draw service."""
import random
from typing import Iterable, Optional

from symbol_quest.models.card import Card
from symbol_quest.repositories.card_catalog import CardCatalog

KEYWORD_BONUS = 1.2
MEANING_WORD_BONUS = 1.1
MIN_MEANING_WORD_LENGTH = 4
RANDOM_FACTOR_RANGE = (0.8, 1.2)
RECENT_CARDS_EXCLUDED = 5


class ServerCardSelector:
    """
    Best-score card selection for authenticated draws.

    Unlike the client-side sampler this picks the highest scoring card
    after a small random perturbation, and skips the cards the user drew
    most recently.
    """

    def __init__(self, catalog: CardCatalog, rng: Optional[random.Random] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def score(self, card: Card, mood: str, question: str) -> float:
        """Deterministic score of a card before the random factor."""
        score = 1.0

        if mood:
            score *= card.mood_weights.get(mood.lower(), 1.0)

        if question:
            question_lower = question.lower()

            for keyword in card.keywords:
                if keyword.lower() in question_lower:
                    score *= KEYWORD_BONUS

            for word in card.traditional_meaning.lower().split():
                word = word.strip(",.;:")
                if len(word) >= MIN_MEANING_WORD_LENGTH and word in question_lower:
                    score *= MEANING_WORD_BONUS

        return score

    def select(
        self,
        mood: str,
        question: str,
        recent_card_ids: Iterable[int] = (),
    ) -> Card:
        """
        Pick the best card for mood and question.

        Args:
            mood: User mood (case-insensitive)
            question: User question, may be empty
            recent_card_ids: Ids of the user's latest draws, newest first

        Returns:
            Selected Card
        """
        excluded = set(list(recent_card_ids)[:RECENT_CARDS_EXCLUDED])
        low, high = RANDOM_FACTOR_RANGE

        best_card = None
        best_score = 0.0
        for card in self.catalog:
            if card.id in excluded:
                continue

            score = self.score(card, mood, question) * self.rng.uniform(low, high)
            if score > best_score:
                best_score = score
                best_card = card

        if best_card is None:
            return self.rng.choice(self.catalog.all())

        return best_card
