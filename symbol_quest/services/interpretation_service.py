"""Premium card interpretations generated by an LLM."""
import logging
from typing import Optional

from symbol_quest.models.card import Card
from symbol_quest.repositories.card_catalog import CardCatalog
from symbol_quest.services.llm_adapter import LLMAdapter, LLMError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a wise and compassionate tarot reader who provides personalized, "
    "insightful interpretations that blend traditional tarot wisdom with modern "
    "psychological insights. Your readings are supportive, empowering, and help "
    "people gain clarity and perspective."
)

MAX_TOKENS = 400
TEMPERATURE = 0.7


class InterpretationError(Exception):
    """Raised when an enhanced interpretation cannot be produced."""
    pass


class InterpretationService:
    """Builds the reading prompt for a card and asks the LLM for it."""

    def __init__(self, llm_adapter: LLMAdapter, catalog: CardCatalog):
        self.llm = llm_adapter
        self.catalog = catalog

    @staticmethod
    def build_prompt(card: Card, mood: Optional[str] = None, question: Optional[str] = None) -> str:
        lines = [
            "Please provide a personalized tarot interpretation for:",
            "",
            f"Card: {card.name} ({card.number})",
            f"Traditional Meaning: {card.traditional_meaning}",
            f"Keywords: {', '.join(card.keywords)}",
            f"Light Aspects: {', '.join(card.light_aspects)}",
            f"Shadow Aspects: {', '.join(card.shadow_aspects)}",
        ]
        if mood:
            lines.append(f"Current Mood: {mood}")
        if question:
            lines.append(f"Question Asked: {question}")

        lines.extend([
            "",
            "Please provide:",
            "1. A personalized interpretation that connects the card's meaning to their mood and question",
            "2. Practical guidance and actionable insights",
            "3. How this card's energy can help them right now",
            "4. A supportive message that empowers them",
            "",
            "Keep the tone warm, wise, and encouraging. Focus on personal growth and "
            "positive transformation while being honest about any challenges the card "
            "might indicate.",
            "",
            "Response should be 2-3 paragraphs, around 250-300 words total.",
        ])
        return "\n".join(lines)

    def generate(self, card_id: int, mood: Optional[str] = None, question: Optional[str] = None) -> str:
        """
        Generate an enhanced interpretation.

        Raises:
            InterpretationError: unknown card, LLM not configured or failing
        """
        card = self.catalog.get(card_id)
        if card is None:
            raise InterpretationError("Invalid card ID")

        if not self.llm.is_configured:
            raise InterpretationError("Interpretation service is not configured")

        try:
            return self.llm.complete(self.build_prompt(card, mood, question))
        except LLMError as e:
            logger.error(f"Enhanced interpretation failed for card {card_id}: {e}")
            raise InterpretationError("Failed to generate interpretation")
