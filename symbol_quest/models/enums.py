"""Enumeration types for models."""
import enum


class Mood(enum.Enum):
    """Mood a user picks before drawing."""

    ANXIOUS = "anxious"
    EXCITED = "excited"
    UNCERTAIN = "uncertain"
    HOPEFUL = "hopeful"
    PEACEFUL = "peaceful"
    FRUSTRATED = "frustrated"
    CURIOUS = "curious"
    CONTEMPLATIVE = "contemplative"

    @classmethod
    def values(cls) -> list:
        return [mood.value for mood in cls]


class SubscriptionTier(enum.Enum):
    """User subscription tier."""

    FREE = "free"
    PREMIUM = "premium"


class DrawStatus(enum.Enum):
    """Result of a draw request."""

    DRAWN = "drawn"
    ALREADY_DRAWN = "already_drawn"
    QUOTA_EXCEEDED = "quota_exceeded"
