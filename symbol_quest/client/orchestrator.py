"""Once-per-day draw flow across the local and remote ledgers."""
import logging
from dataclasses import dataclass
from typing import List, Optional

from symbol_quest.client.errors import (
    AlreadyDrawnError,
    ApiError,
    AuthenticationError,
    DrawValidationError,
    QuotaExceededError,
)
from symbol_quest.client.ledger import DrawRecord
from symbol_quest.client.local_ledger import LocalDrawLedger
from symbol_quest.client.remote_ledger import RemoteDrawLedger
from symbol_quest.client.session import ClientSession
from symbol_quest.models.card import Card, UserContext
from symbol_quest.models.enums import DrawStatus
from symbol_quest.services.card_selector import CardSelector

logger = logging.getLogger(__name__)

LOCAL = "local"
REMOTE = "remote"

ALREADY_DRAWN_MESSAGE = "You've already drawn your card for today."
QUOTA_EXCEEDED_MESSAGE = "Daily draw limit reached."


@dataclass
class DrawOutcome:
    """What a draw request produced and which backend answered it."""

    status: DrawStatus
    card: Optional[Card] = None
    backend: str = LOCAL
    record: Optional[DrawRecord] = None
    message: str = ""
    upgrade_required: bool = False

    @property
    def is_new(self) -> bool:
        return self.status == DrawStatus.DRAWN


class DrawOrchestrator:
    """
    Single entry point for drawing today's card.

    Order of checks:
      1. validate mood and question
      2. remote path when the session is authenticated
      3. already drawn today -> stored card, no new sample
      4. remote already-drawn / quota responses -> non-fatal outcomes
      5. sample and record
    Any other remote failure is logged and the local path is used.
    """

    def __init__(
        self,
        local_ledger: LocalDrawLedger,
        selector: CardSelector,
        session: Optional[ClientSession] = None,
        remote_ledger: Optional[RemoteDrawLedger] = None,
    ):
        self.local_ledger = local_ledger
        self.selector = selector
        self.session = session
        if remote_ledger is None and session is not None:
            remote_ledger = RemoteDrawLedger(
                session.client,
                selector.catalog,
                cache=local_ledger,
                clock=local_ledger.clock,
            )
        self.remote_ledger = remote_ledger

    @staticmethod
    def validate(context: UserContext) -> None:
        if not context.mood:
            raise DrawValidationError("Please select your mood")
        if not (context.question or "").strip():
            raise DrawValidationError("Please enter a question")

    def use_remote(self) -> bool:
        return (
            self.remote_ledger is not None
            and self.session is not None
            and self.session.is_authenticated
        )

    def perform_draw(self, context: UserContext) -> DrawOutcome:
        self.validate(context)

        if self.use_remote():
            try:
                return self._draw_remote(context)
            except ApiError as e:
                logger.warning(f"Remote draw failed, using local draw: {e.message}")

        return self._draw_local(context)

    def _draw_local(self, context: UserContext) -> DrawOutcome:
        if self.local_ledger.has_drawn_today():
            record = self.local_ledger.latest_record()
            return DrawOutcome(
                status=DrawStatus.ALREADY_DRAWN,
                card=record.card if record else None,
                backend=LOCAL,
                record=record,
                message=ALREADY_DRAWN_MESSAGE,
            )

        record = self.local_ledger.draw(context, self.selector)
        return DrawOutcome(
            status=DrawStatus.DRAWN,
            card=record.card,
            backend=LOCAL,
            record=record,
        )

    def _draw_remote(self, context: UserContext) -> DrawOutcome:
        remote = self.remote_ledger
        status = remote.today_status()

        if status.has_drawn:
            card = remote.card_from_status(status)
            record = self._remember_remote_draw(card)
            return DrawOutcome(
                status=DrawStatus.ALREADY_DRAWN,
                card=card or (record.card if record else None),
                backend=REMOTE,
                record=record,
                message=ALREADY_DRAWN_MESSAGE,
            )

        if not status.can_draw:
            return DrawOutcome(
                status=DrawStatus.QUOTA_EXCEEDED,
                backend=REMOTE,
                message=QUOTA_EXCEEDED_MESSAGE,
                upgrade_required=True,
            )

        try:
            record = remote.draw(context, self.selector)
        except AlreadyDrawnError as e:
            record = self._remember_remote_draw(
                None, remote.record_from_payload(e.payload.get("card"))
            )
            return DrawOutcome(
                status=DrawStatus.ALREADY_DRAWN,
                card=record.card if record else None,
                backend=REMOTE,
                record=record,
                message=e.message,
            )
        except QuotaExceededError as e:
            return DrawOutcome(
                status=DrawStatus.QUOTA_EXCEEDED,
                backend=REMOTE,
                message=e.message,
                upgrade_required=e.upgrade_required,
            )

        return DrawOutcome(
            status=DrawStatus.DRAWN,
            card=record.card,
            backend=REMOTE,
            record=record,
        )

    def _remember_remote_draw(
        self,
        card: Optional[Card],
        confirmed: Optional[DrawRecord] = None,
    ) -> Optional[DrawRecord]:
        """Keep a service-confirmed draw in the local ledger for today.

        A later local fallback on the same day must see it as already drawn.
        Returns the confirmed record when given, else today's local record.
        """
        if card is None and confirmed is not None:
            card = confirmed.card

        local = self.local_ledger.latest_record()
        if local is None or local.date != self.local_ledger.today():
            local = None
            if card is not None:
                local = self.local_ledger.record_draw(
                    card,
                    confirmed.context if confirmed else None,
                    confirmed.interpretation if confirmed else None,
                )
                logger.info(f"Cached service draw of {card.name} for {local.date}")

        return confirmed or local

    def todays_card(self) -> Optional[Card]:
        if self.use_remote():
            try:
                return self.remote_ledger.get_todays_card()
            except ApiError as e:
                logger.warning(f"Could not load today's card from service: {e.message}")
        return self.local_ledger.get_todays_card()

    def history(self) -> List[DrawRecord]:
        if self.use_remote():
            try:
                return self.remote_ledger.get_history()
            except ApiError as e:
                logger.warning(f"Could not load draw history from service: {e.message}")
        return self.local_ledger.get_history()

    def request_enhanced_interpretation(self, record: DrawRecord) -> str:
        """Premium reading for a draw; requires a signed-in session."""
        if not self.use_remote():
            raise AuthenticationError("Sign in to request an enhanced interpretation")

        context = record.context
        interpretation = self.session.client.get_enhanced_interpretation(
            record.card.id,
            context.mood if context else "",
            context.question if context else "",
            record.date,
        )
        record.interpretation = interpretation
        return interpretation
