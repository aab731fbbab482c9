"""Domain models package."""
from symbol_quest.models.card import Card, UserContext
from symbol_quest.models.enums import DrawStatus, Mood, SubscriptionTier
from symbol_quest.models.user import User
from symbol_quest.models.card_draw import CardDraw
from symbol_quest.models.daily_usage import DailyUsage

__all__ = [
    # Models
    "User",
    "CardDraw",
    "DailyUsage",
    # Value objects
    "Card",
    "UserContext",
    # Enums
    "Mood",
    "SubscriptionTier",
    "DrawStatus",
]
