"""User domain model."""
from symbol_quest.extensions import db
from symbol_quest.models.base import BaseModel
from symbol_quest.models.enums import SubscriptionTier


class User(BaseModel):
    """User account with its subscription tier."""

    __tablename__ = "user"

    email = db.Column(
        db.String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash = db.Column(db.String(255), nullable=False)
    subscription_tier = db.Column(
        db.Enum(SubscriptionTier),
        nullable=False,
        default=SubscriptionTier.FREE,
    )

    draws = db.relationship(
        "CardDraw",
        backref="user",
        lazy="dynamic",
        cascade="all, delete-orphan",
    )

    @property
    def is_premium(self) -> bool:
        return self.subscription_tier == SubscriptionTier.PREMIUM

    def to_dict(self) -> dict:
        """
        Convert to dictionary, excluding sensitive data.

        Returns:
            Dictionary representation without password_hash.
        """
        tier = self.subscription_tier or SubscriptionTier.FREE
        return {
            "id": str(self.id),
            "email": self.email,
            "subscription_tier": tier.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
