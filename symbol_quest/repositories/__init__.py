"""Repositories package."""
from symbol_quest.repositories.base import BaseRepository
from symbol_quest.repositories.card_catalog import CardCatalog, CatalogError, get_catalog
from symbol_quest.repositories.user_repository import UserRepository
from symbol_quest.repositories.card_draw_repository import CardDrawRepository
from symbol_quest.repositories.daily_usage_repository import DailyUsageRepository

__all__ = [
    "BaseRepository",
    "CardCatalog",
    "CatalogError",
    "get_catalog",
    "UserRepository",
    "CardDrawRepository",
    "DailyUsageRepository",
]
