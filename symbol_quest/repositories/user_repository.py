"""User repository implementation."""
from typing import Optional

from symbol_quest.models.user import User
from symbol_quest.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations."""

    def __init__(self, session):
        super().__init__(session=session, model=User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address."""
        return self._session.query(User).filter(User.email == email).first()

    def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        return self._session.query(User).filter(User.email == email).count() > 0
