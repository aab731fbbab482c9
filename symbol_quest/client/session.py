"""Client configuration and authenticated session."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from symbol_quest.client.api_client import DEFAULT_API_URL, DEFAULT_TIMEOUT, ApiClient
from symbol_quest.client.responses import AuthResult
from symbol_quest.client.storage import KeyValueStorage

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "auth_token"


@dataclass
class ClientConfig:
    """Settings for the terminal client."""

    api_url: str = DEFAULT_API_URL
    home: str = os.path.join(os.path.expanduser("~"), ".symbol_quest")
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        defaults = cls()
        try:
            timeout = int(os.getenv("SYMBOL_QUEST_TIMEOUT", defaults.timeout))
        except ValueError:
            logger.warning("Invalid SYMBOL_QUEST_TIMEOUT, using default")
            timeout = defaults.timeout
        return cls(
            api_url=os.getenv("SYMBOL_QUEST_API_URL", defaults.api_url),
            home=os.getenv("SYMBOL_QUEST_HOME", defaults.home),
            timeout=timeout,
        )


class ClientSession:
    """
    Owns the ApiClient and the persisted auth token.

    The token lives in the same key/value storage as the local ledger so
    a restarted client resumes the session.
    """

    def __init__(self, client: ApiClient, storage: KeyValueStorage):
        self.client = client
        self.storage = storage
        if not self.client.token:
            self.client.token = self.storage.get_item(AUTH_TOKEN_KEY)

    @classmethod
    def from_config(cls, config: ClientConfig, storage: KeyValueStorage) -> "ClientSession":
        return cls(ApiClient(config.api_url, timeout=config.timeout), storage)

    @property
    def is_authenticated(self) -> bool:
        return self.client.is_authenticated()

    def login(self, email: str, password: str) -> AuthResult:
        result = self.client.login(email, password)
        self._store_token()
        return result

    def register(self, email: str, password: str) -> AuthResult:
        result = self.client.register(email, password)
        self._store_token()
        return result

    def logout(self) -> None:
        self.client.logout()
        self.storage.remove_item(AUTH_TOKEN_KEY)

    def _store_token(self) -> None:
        if self.client.token:
            self.storage.set_item(AUTH_TOKEN_KEY, self.client.token)
