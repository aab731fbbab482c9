"""Shared test fixtures."""
import random
from datetime import datetime, timedelta

import pytest

from symbol_quest.app import create_app
from symbol_quest.extensions import db
from symbol_quest.repositories.card_catalog import get_catalog

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "RATELIMIT_ENABLED": False,
    "SECRET_KEY": "test-secret-key",
    "JWT_SECRET_KEY": "test-jwt-secret-key-that-is-long-enough-for-hs256",
    "LLM_API_ENDPOINT": "",
    "LLM_API_KEY": "",
}


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float = 0.5):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class FakeClock:
    """Settable replacement for datetime.now."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        self.moment += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 1, 9, 30))


@pytest.fixture
def fixed_random():
    """Factory for random sources pinned to one value."""
    return FixedRandom


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def make_app():
    """Build an app with config overrides and a fresh in-memory database."""
    created = []

    def _make(**overrides):
        app = create_app({**TEST_CONFIG, **overrides})
        ctx = app.app_context()
        ctx.push()
        db.create_all()
        created.append(ctx)
        return app

    yield _make

    for ctx in reversed(created):
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
