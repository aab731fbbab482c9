"""Route decorators."""
from symbol_quest.decorators.auth import require_auth, require_premium

__all__ = ["require_auth", "require_premium"]
