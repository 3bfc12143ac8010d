import pytest

from healthstack import create_app
from healthstack.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "APP_ENV": "test",
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "JWT_SECRET": "test-secret",
    "RATELIMIT_ENABLED": False,
}


def register(client, email, name="Test User", password="secret123"):
    r = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
    assert r.status_code == 201, r.data
    body = r.get_json()
    return body["user"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture()
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def alice(client):
    """(user, headers) for the first registered user."""
    return register(client, "alice@example.com", name="Alice")


@pytest.fixture()
def bob(client):
    return register(client, "bob@example.com", name="Bob")


@pytest.fixture()
def headers(alice):
    return alice[1]


@pytest.fixture()
def make_app():
    """Build an extra app from the test config; a None override removes the key."""

    def _make(**overrides):
        config = {**TEST_CONFIG, **overrides}
        return create_app({k: v for k, v in config.items() if v is not None})

    return _make
