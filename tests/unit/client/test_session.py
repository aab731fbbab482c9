"""Tests for client configuration and session."""
from unittest.mock import MagicMock

from symbol_quest.client.api_client import ApiClient
from symbol_quest.client.responses import AuthResult
from symbol_quest.client.session import AUTH_TOKEN_KEY, ClientConfig, ClientSession
from symbol_quest.client.storage import MemoryStorage


class TestClientConfig:
    """Tests for ClientConfig.from_env."""

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SYMBOL_QUEST_API_URL", "https://draws.example/api")
        monkeypatch.setenv("SYMBOL_QUEST_HOME", str(tmp_path))
        monkeypatch.setenv("SYMBOL_QUEST_TIMEOUT", "3")

        config = ClientConfig.from_env()

        assert config.api_url == "https://draws.example/api"
        assert config.home == str(tmp_path)
        assert config.timeout == 3

    def test_invalid_timeout_uses_default(self, monkeypatch):
        monkeypatch.setenv("SYMBOL_QUEST_TIMEOUT", "soon")

        assert ClientConfig.from_env().timeout == ClientConfig().timeout


class TestClientSession:
    """Tests for ClientSession."""

    def test_restores_token_from_storage(self):
        storage = MemoryStorage({AUTH_TOKEN_KEY: "saved"})

        session = ClientSession(ApiClient("http://api.test/api"), storage)

        assert session.client.token == "saved"
        assert session.is_authenticated is True

    def test_anonymous_without_token(self):
        session = ClientSession(ApiClient("http://api.test/api"), MemoryStorage())

        assert session.is_authenticated is False

    def test_login_persists_token(self):
        client = MagicMock()
        client.token = None

        def login(email, password):
            client.token = "fresh"
            return AuthResult(token="fresh", email=email)

        client.login.side_effect = login
        storage = MemoryStorage()
        session = ClientSession(client, storage)

        result = session.login("a@b.c", "password123")

        assert result.email == "a@b.c"
        assert storage.get_item(AUTH_TOKEN_KEY) == "fresh"

    def test_logout_forgets_token(self):
        client = MagicMock()
        client.token = "saved"
        storage = MemoryStorage({AUTH_TOKEN_KEY: "saved"})
        session = ClientSession(client, storage)

        session.logout()

        client.logout.assert_called_once()
        assert storage.get_item(AUTH_TOKEN_KEY) is None

    def test_from_config(self):
        config = ClientConfig(api_url="http://api.test/api", home="/tmp/unused", timeout=7)

        session = ClientSession.from_config(config, MemoryStorage())

        assert session.client.base_url == "http://api.test/api"
        assert session.client.timeout == 7
