"""Daily draw usage tracking model."""
from symbol_quest.extensions import db
from symbol_quest.models.base import BaseModel


class DailyUsage(BaseModel):
    """
    Number of draws a user made on one day.

    Compared against DAILY_DRAW_LIMIT before a new draw.
    """

    __tablename__ = "daily_usage"

    user_id = db.Column(
        db.String(36), db.ForeignKey("user.id"), nullable=False, index=True
    )
    usage_date = db.Column(db.Date, nullable=False, index=True)
    draws_count = db.Column(db.Integer, default=0, nullable=False)

    # Unique constraint: one record per user/day
    __table_args__ = (
        db.UniqueConstraint("user_id", "usage_date", name="uq_user_usage_date"),
    )

    def increment(self, amount: int = 1) -> int:
        """Increment draw count and return the new value."""
        self.draws_count = (self.draws_count or 0) + amount
        return self.draws_count

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "usage_date": self.usage_date.isoformat() if self.usage_date else None,
            "draws_count": self.draws_count,
        }

    def __repr__(self) -> str:
        return f"<DailyUsage(user={self.user_id}, date='{self.usage_date}', count={self.draws_count})>"
