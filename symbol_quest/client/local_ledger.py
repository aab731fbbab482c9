"""Draw ledger persisted in local key/value storage."""
import json
import logging
from typing import List, Optional

from symbol_quest.client.ledger import (
    HISTORY_LIMIT,
    Clock,
    DrawLedger,
    DrawRecord,
    day_string,
    to_ms,
)
from symbol_quest.client.storage import KeyValueStorage
from symbol_quest.models.card import Card, UserContext
from symbol_quest.services.card_selector import CardSelector

logger = logging.getLogger(__name__)

LAST_DRAW_KEY = "lastCardDraw"
HISTORY_KEY = "cardHistory"

_CORRUPT_ERRORS = (
    ValueError,
    TypeError,
    KeyError,
    AttributeError,
    OverflowError,
    RecursionError,
)


class LocalDrawLedger(DrawLedger):
    """
    Ledger over two storage keys:
      - lastCardDraw: the most recent DrawRecord
      - cardHistory:  list of DrawRecords, newest first

    Unparsable stored values read as "nothing stored"; unreadable history
    items are skipped and the rest of the history is kept.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Optional[Clock] = None,
        history_limit: int = HISTORY_LIMIT,
    ):
        super().__init__(clock)
        self.storage = storage
        self.history_limit = history_limit

    def latest_record(self) -> Optional[DrawRecord]:
        raw = self.storage.get_item(LAST_DRAW_KEY)
        if not raw:
            return None

        try:
            return DrawRecord.from_dict(json.loads(raw))
        except _CORRUPT_ERRORS as e:
            logger.warning(f"Ignoring corrupt '{LAST_DRAW_KEY}' entry: {e}")
            return None

    def get_history(self) -> List[DrawRecord]:
        raw = self.storage.get_item(HISTORY_KEY)
        if not raw:
            return []

        try:
            entries = json.loads(raw)
        except _CORRUPT_ERRORS as e:
            logger.warning(f"Ignoring corrupt '{HISTORY_KEY}' entry: {e}")
            return []
        if not isinstance(entries, list):
            logger.warning(
                f"Ignoring corrupt '{HISTORY_KEY}' entry: expected a list, "
                f"got {type(entries).__name__}"
            )
            return []

        history = []
        for position, entry in enumerate(entries):
            try:
                history.append(DrawRecord.from_dict(entry))
            except _CORRUPT_ERRORS as e:
                logger.warning(f"Skipping corrupt '{HISTORY_KEY}' item {position}: {e}")
        return history[: self.history_limit]

    def record_draw(
        self,
        card: Card,
        context: Optional[UserContext],
        interpretation: Optional[str] = None,
    ) -> DrawRecord:
        moment = self.clock()
        timestamp = to_ms(moment)
        record = DrawRecord(
            card=card,
            context=context,
            date=day_string(moment),
            timestamp=timestamp,
            id=DrawRecord.make_id(timestamp, card.id),
            interpretation=interpretation,
        )
        return self.store_record(record)

    def store_record(self, record: DrawRecord) -> DrawRecord:
        """Write record to the latest slot and the front of history."""
        self.storage.set_item(LAST_DRAW_KEY, json.dumps(record.to_dict()))

        history = self.get_history()
        history.insert(0, record)
        history = history[: self.history_limit]
        self.storage.set_item(
            HISTORY_KEY,
            json.dumps([entry.to_dict() for entry in history]),
        )
        return record

    def draw(self, context: UserContext, selector: CardSelector) -> DrawRecord:
        card = selector.select_card(context)
        record = self.record_draw(card, context)
        logger.info(f"Drew {card.name} locally for {record.date}")
        return record
