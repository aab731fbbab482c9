"""Draw ledger backed by the remote draw service."""
import logging
from datetime import datetime
from typing import List, Optional

from symbol_quest.client.api_client import ApiClient
from symbol_quest.client.errors import ApiError
from symbol_quest.client.ledger import (
    HISTORY_LIMIT,
    Clock,
    DrawLedger,
    DrawRecord,
    day_string,
    to_ms,
)
from symbol_quest.client.local_ledger import LocalDrawLedger
from symbol_quest.client.responses import RemoteDraw, TodayStatus
from symbol_quest.models.card import Card, UserContext
from symbol_quest.repositories.card_catalog import CardCatalog
from symbol_quest.services.card_selector import CardSelector

logger = logging.getLogger(__name__)


class RemoteDrawLedger(DrawLedger):
    """
    Ledger whose source of truth is the draw service.

    The service picks the card and enforces the daily quota, so `draw()`
    ignores the local selector. Successful draws are mirrored into the
    optional local cache ledger.
    """

    def __init__(
        self,
        client: ApiClient,
        catalog: CardCatalog,
        cache: Optional[LocalDrawLedger] = None,
        clock: Optional[Clock] = None,
        history_limit: int = HISTORY_LIMIT,
    ):
        super().__init__(clock)
        self.client = client
        self.catalog = catalog
        self.cache = cache
        self.history_limit = history_limit

    def today_status(self) -> TodayStatus:
        """Draw status for today, including draws_today and limit."""
        return self.client.get_today_status()

    def has_drawn_today(self) -> bool:
        return self.today_status().has_drawn

    def get_todays_card(self) -> Optional[Card]:
        return self.card_from_status(self.today_status())

    def card_from_status(self, status: TodayStatus) -> Optional[Card]:
        if not status.has_drawn or status.card is None:
            return None
        return self._resolve_card(status.card.id, status.card.name)

    def latest_record(self) -> Optional[DrawRecord]:
        if self.cache is None:
            return None
        return self.cache.latest_record()

    def record_draw(
        self,
        card: Card,
        context: Optional[UserContext],
        interpretation: Optional[str] = None,
    ) -> DrawRecord:
        """Record locally only; the service stores its own draws."""
        if self.cache is not None:
            return self.cache.record_draw(card, context, interpretation)

        moment = self.clock()
        timestamp = to_ms(moment)
        return DrawRecord(
            card=card,
            context=context,
            date=day_string(moment),
            timestamp=timestamp,
            id=DrawRecord.make_id(timestamp, card.id),
            interpretation=interpretation,
        )

    def get_history(self) -> List[DrawRecord]:
        history = self.client.get_draw_history(limit=self.history_limit)
        return [self._to_record(draw) for draw in history.draws][: self.history_limit]

    def draw(self, context: UserContext, selector: Optional[CardSelector] = None) -> DrawRecord:
        """Ask the service for today's card.

        Raises AlreadyDrawnError / QuotaExceededError from the client as-is.
        """
        result = self.client.perform_daily_draw(context.mood, context.question)
        if result.card is None:
            raise ApiError("Draw response did not include a card")

        record = self._to_record(result.card, context)
        if self.cache is not None:
            self.cache.store_record(record)

        logger.info(f"Drew {record.card.name} remotely for {record.date}")
        return record

    def record_from_payload(self, payload: object) -> Optional[DrawRecord]:
        """Map a raw draw payload (e.g. the card of a 409 response) to a record."""
        draw = RemoteDraw.from_payload(payload)
        return self._to_record(draw) if draw else None

    def _resolve_card(self, card_id: int, name: str = "") -> Card:
        card = self.catalog.get(card_id)
        if card is None:
            logger.warning(f"Card {card_id} missing from local catalog")
            card = Card(id=card_id, name=name)
        return card

    def _to_record(
        self,
        draw: RemoteDraw,
        context: Optional[UserContext] = None,
    ) -> DrawRecord:
        moment = self._parse_moment(draw.created_at)
        timestamp = to_ms(moment) if moment else (context.timestamp if context else 0)
        date = draw.draw_date or (day_string(moment) if moment else self.today())

        if context is None and (draw.mood or draw.question):
            context = UserContext(mood=draw.mood, question=draw.question, timestamp=timestamp)

        return DrawRecord(
            card=self._resolve_card(draw.card_id, draw.card_name),
            context=context,
            date=date,
            timestamp=timestamp,
            id=DrawRecord.make_id(timestamp, draw.card_id),
            interpretation=draw.interpretation_enhanced or draw.interpretation_basic or None,
        )

    @staticmethod
    def _parse_moment(value: str) -> Optional[datetime]:
        if not value:
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
