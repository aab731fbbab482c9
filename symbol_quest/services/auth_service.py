"""Account registration and login."""
import logging
from dataclasses import dataclass
from typing import Optional

import bcrypt
from flask_jwt_extended import create_access_token

from symbol_quest.models.enums import SubscriptionTier
from symbol_quest.models.user import User
from symbol_quest.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


@dataclass
class AuthResult:
    """Outcome of register/login."""

    success: bool
    token: Optional[str] = None
    user: Optional[User] = None
    error: Optional[str] = None
    conflict: bool = False


class AuthService:
    """Creates accounts, verifies credentials and issues access tokens."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @staticmethod
    def hash_password(password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    @staticmethod
    def create_token(user: User) -> str:
        return create_access_token(identity=str(user.id))

    def register(self, email: str, password: str) -> AuthResult:
        """
        Register a new free-tier user.

        Returns:
            AuthResult with token on success, conflict=True if email is taken
        """
        email = email.strip().lower()
        if self._user_repo.email_exists(email):
            return AuthResult(success=False, error="User already exists", conflict=True)

        if len(password) < MIN_PASSWORD_LENGTH:
            return AuthResult(
                success=False,
                error=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )

        user = User(
            email=email,
            password_hash=self.hash_password(password),
            subscription_tier=SubscriptionTier.FREE,
        )
        self._user_repo.save(user)
        logger.info(f"Registered user {user.id}")

        return AuthResult(success=True, token=self.create_token(user), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a token."""
        user = self._user_repo.find_by_email(email.strip().lower())
        if not user or not self.verify_password(password, user.password_hash):
            return AuthResult(success=False, error="Invalid credentials")

        return AuthResult(success=True, token=self.create_token(user), user=user)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._user_repo.find_by_id(user_id)
