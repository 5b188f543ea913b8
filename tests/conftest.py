import pytest

from darkflix import create_app
from darkflix.config import TestConfig
from darkflix.extensions import db
from darkflix.party.registry import get_registry


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_app(clock):
    """Factory for apps built on TestConfig plus per-test overrides."""
    apps = []

    def _make(**overrides):
        class Config(TestConfig):
            pass

        for key, value in overrides.items():
            setattr(Config, key, value)
        app = create_app(Config, clock=clock)
        ctx = app.app_context()
        ctx.push()
        db.create_all()
        apps.append((app, ctx))
        return app

    yield _make

    for _, ctx in reversed(apps):
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def registry(app):
    return get_registry()


def signup(client, name="Alice", email="alice@example.com", password="hunter22"):
    return client.post(
        "/signup",
        json={
            "name": name,
            "email": email,
            "password": password,
            "confirmPassword": password,
        },
    )
