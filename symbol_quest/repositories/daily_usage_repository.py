"""Daily draw usage repository."""
from datetime import date

from symbol_quest.models.daily_usage import DailyUsage
from symbol_quest.repositories.base import BaseRepository


class DailyUsageRepository(BaseRepository[DailyUsage]):
    """Repository for per-day draw counters."""

    def __init__(self, session):
        """Initialize with DailyUsage model."""
        super().__init__(session, DailyUsage)

    def get_usage(self, user_id: str, usage_date: date):
        """
        Get usage record for user/day.

        Returns:
            DailyUsage record or None
        """
        return (
            self._session.query(DailyUsage)
            .filter(
                DailyUsage.user_id == user_id,
                DailyUsage.usage_date == usage_date,
            )
            .first()
        )

    def get_draws_count(self, user_id: str, usage_date: date) -> int:
        """Draws made on usage_date (0 if no record exists)."""
        record = self.get_usage(user_id, usage_date)
        return record.draws_count if record else 0

    def increment_usage(self, user_id: str, usage_date: date, amount: int = 1) -> int:
        """
        Increment draw count for a day.

        Creates record if it doesn't exist. Does not commit; the caller
        commits together with the draw.

        Returns:
            New draw count
        """
        record = self.get_usage(user_id, usage_date)

        if record:
            record.increment(amount)
        else:
            record = DailyUsage(
                user_id=user_id,
                usage_date=usage_date,
                draws_count=amount,
            )
            self._session.add(record)

        return record.draws_count
