"""Repository for CardDraw data access."""
from datetime import date
from typing import List, Optional

from symbol_quest.models.card_draw import CardDraw
from symbol_quest.repositories.base import BaseRepository


class CardDrawRepository(BaseRepository[CardDraw]):
    """Repository for CardDraw model database operations."""

    def __init__(self, session):
        super().__init__(session, CardDraw)

    def find_by_user_and_date(self, user_id: str, draw_date: date) -> Optional[CardDraw]:
        """Get the user's draw for a day."""
        return (
            self._session.query(CardDraw)
            .filter(CardDraw.user_id == user_id, CardDraw.draw_date == draw_date)
            .first()
        )

    def find_recent_by_user(self, user_id: str, limit: int = 30) -> List[CardDraw]:
        """Get the user's draws, newest first."""
        return (
            self._session.query(CardDraw)
            .filter(CardDraw.user_id == user_id)
            .order_by(CardDraw.draw_date.desc(), CardDraw.created_at.desc())
            .limit(limit)
            .all()
        )

    def find_recent_card_ids(self, user_id: str, limit: int) -> List[int]:
        """Card ids of the user's most recent draws."""
        return [draw.card_id for draw in self.find_recent_by_user(user_id, limit)]

    def update_enhanced_interpretation(
        self, user_id: str, draw_date: date, interpretation: str
    ) -> bool:
        """Store the enhanced interpretation on a draw. Returns True if updated."""
        draw = self.find_by_user_and_date(user_id, draw_date)
        if not draw:
            return False

        draw.interpretation_enhanced = interpretation
        self._session.commit()
        return True
