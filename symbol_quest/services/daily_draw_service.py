"""Daily draw rules for authenticated users."""
import logging
from datetime import date
from typing import Callable, List, Optional

from symbol_quest.models.card_draw import CardDraw
from symbol_quest.models.user import User
from symbol_quest.repositories.card_catalog import CardCatalog
from symbol_quest.repositories.card_draw_repository import CardDrawRepository
from symbol_quest.repositories.daily_usage_repository import DailyUsageRepository
from symbol_quest.services.server_card_selector import (
    RECENT_CARDS_EXCLUDED,
    ServerCardSelector,
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20


class DrawAlreadyCompletedError(Exception):
    """Raised when the user already drew a card today."""

    def __init__(self, draw: CardDraw):
        super().__init__("Daily draw already completed")
        self.draw = draw


class DailyLimitReachedError(Exception):
    """Raised when a free user has used up today's draws."""
    pass


class DailyDrawService:
    """
    One card per user per day.

    Draw flow:
    1. Existing draw for today -> DrawAlreadyCompletedError
    2. Free tier over DAILY_DRAW_LIMIT -> DailyLimitReachedError
    3. ServerCardSelector picks a card, skipping recent ones
    4. Draw and usage counter are committed together
    """

    def __init__(
        self,
        card_draw_repository: CardDrawRepository,
        daily_usage_repository: DailyUsageRepository,
        selector: ServerCardSelector,
        catalog: CardCatalog,
        daily_limit: int = 1,
        history_limit: int = 30,
        today: Optional[Callable[[], date]] = None,
    ):
        self.card_draw_repo = card_draw_repository
        self.daily_usage_repo = daily_usage_repository
        self.selector = selector
        self.catalog = catalog
        self.daily_limit = daily_limit
        self.history_limit = history_limit
        self.today = today or date.today

    def get_today_status(self, user: User) -> dict:
        """Draw status for today: has_drawn, can_draw, card, draws_today, limit."""
        today = self.today()
        draw = self.card_draw_repo.find_by_user_and_date(user.id, today)
        draws_today = self.daily_usage_repo.get_draws_count(user.id, today)

        if draw is None:
            return {
                "has_drawn": False,
                "can_draw": self._has_quota(user, draws_today),
                "card": None,
                "draws_today": draws_today,
                "limit": self.daily_limit,
            }

        card = self.catalog.get(draw.card_id)
        return {
            "has_drawn": True,
            "can_draw": False,
            "card": {
                "id": draw.card_id,
                "name": draw.card_name,
                "traditional_meaning": card.traditional_meaning if card else draw.interpretation_basic,
            },
            "draws_today": draws_today,
            "limit": self.daily_limit,
        }

    def perform_daily_draw(self, user: User, mood: str, question: str) -> CardDraw:
        """
        Draw today's card for user.

        Raises:
            DrawAlreadyCompletedError: user has a draw dated today
            DailyLimitReachedError: free tier quota used up
        """
        today = self.today()
        existing = self.card_draw_repo.find_by_user_and_date(user.id, today)
        if existing is not None:
            raise DrawAlreadyCompletedError(existing)

        draws_today = self.daily_usage_repo.get_draws_count(user.id, today)
        if not self._has_quota(user, draws_today):
            raise DailyLimitReachedError(
                "Daily limit reached - upgrade to premium for unlimited draws"
            )

        recent = self.card_draw_repo.find_recent_card_ids(user.id, RECENT_CARDS_EXCLUDED)
        card = self.selector.select(mood, question, recent)

        draw = CardDraw(
            user_id=user.id,
            card_id=card.id,
            card_name=card.name,
            draw_date=today,
            interpretation_basic=card.traditional_meaning,
            mood=mood,
            question=question,
        )
        self.daily_usage_repo.increment_usage(user.id, today)
        self.card_draw_repo.save(draw)

        logger.info(f"User {user.id} drew {card.name} on {today.isoformat()}")
        return draw

    def get_draw_history(self, user: User, limit: Optional[int] = None) -> List[CardDraw]:
        """Past draws, newest first; limit is capped at history_limit."""
        if not limit or limit <= 0:
            limit = DEFAULT_HISTORY_LIMIT
        return self.card_draw_repo.find_recent_by_user(user.id, min(limit, self.history_limit))

    def draw_to_dict(self, draw: CardDraw) -> dict:
        """API view of a draw, including the card's roman numeral."""
        data = draw.to_dict()
        card = self.catalog.get(draw.card_id)
        data["number"] = card.number if card else ""
        return data

    def save_enhanced_interpretation(
        self, user: User, draw_date: date, interpretation: str
    ) -> bool:
        return self.card_draw_repo.update_enhanced_interpretation(
            user.id, draw_date, interpretation
        )

    def _has_quota(self, user: User, draws_today: int) -> bool:
        if user.is_premium:
            return True
        return draws_today < self.daily_limit
