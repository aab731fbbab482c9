"""CardDraw domain model - one daily draw of a user."""
from symbol_quest.extensions import db
from symbol_quest.models.base import BaseModel


class CardDraw(BaseModel):
    """
    A card drawn by a user on a given day.

    Only the card id and name are stored; the rest of the card comes
    from the catalog. One row per user per draw date.
    """

    __tablename__ = "card_draw"

    user_id = db.Column(
        db.String(36), db.ForeignKey("user.id"), nullable=False, index=True
    )
    card_id = db.Column(db.Integer, nullable=False)
    card_name = db.Column(db.String(100), nullable=False)
    draw_date = db.Column(db.Date, nullable=False, index=True)

    interpretation_basic = db.Column(db.Text, nullable=False, default="")
    interpretation_enhanced = db.Column(db.Text, nullable=True)

    mood = db.Column(db.String(50), nullable=True)
    question = db.Column(db.Text, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("user_id", "draw_date", name="uq_user_draw_date"),
    )

    def to_dict(self) -> dict:
        """Convert CardDraw to dictionary for API response."""
        return {
            "id": str(self.id),
            "card_id": self.card_id,
            "card_name": self.card_name,
            "draw_date": self.draw_date.isoformat() if self.draw_date else None,
            "interpretation_basic": self.interpretation_basic,
            "interpretation_enhanced": self.interpretation_enhanced,
            "mood": self.mood,
            "question": self.question,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<CardDraw(user_id='{self.user_id}', card_id={self.card_id}, date='{self.draw_date}')>"
