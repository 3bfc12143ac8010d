import pytest

from healthstack.config import engine_options_for, normalize_database_url
from healthstack.extensions import db
from healthstack.models import Meal, ShoppingListItem, User
from healthstack.scripts.seed_demo import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "ok"
    assert body["timestamp"].endswith("Z")


def test_unknown_route_is_json(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Route not found", "code": "ROUTE_NOT_FOUND"}


def test_wrong_method_is_json(client, headers):
    r = client.patch("/api/food-logs", headers=headers)
    assert r.status_code == 405
    assert r.get_json()["code"] == "METHOD_NOT_ALLOWED"


def test_normalize_database_url():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql://u:p@h/db"
    assert normalize_database_url("sqlite:///x.db") == "sqlite:///x.db"


def test_engine_options_only_for_networked_databases():
    assert engine_options_for("sqlite:///:memory:") == {}
    assert engine_options_for("postgresql://u:p@h/db")["pool_pre_ping"] is True


@pytest.fixture()
def limited_app(make_app):
    app = make_app(RATELIMIT_ENABLED=True, RATELIMIT_DEFAULT="3 per minute")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


def test_rate_limit_per_client(limited_app):
    client = limited_app.test_client()
    statuses = [client.get("/api/food-logs").status_code for _ in range(4)]
    assert statuses == [401, 401, 401, 429]

    r = client.get("/api/food-logs")
    assert r.get_json() == {
        "error": "Too many requests from this IP, please try again later.",
        "code": "RATE_LIMITED",
    }


def test_health_is_never_limited(limited_app):
    client = limited_app.test_client()
    for _ in range(6):
        assert client.get("/health").status_code == 200


def test_rate_limit_follows_app_env(make_app):
    assert make_app(APP_ENV="production", RATELIMIT_ENABLED=None).config["RATELIMIT_ENABLED"] is True
    assert make_app(APP_ENV="development", RATELIMIT_ENABLED=None).config["RATELIMIT_ENABLED"] is False


def test_seed_is_idempotent(app, client):
    first = seed_demo_data()
    second = seed_demo_data()
    assert first.id == second.id
    assert User.query.filter_by(email=DEMO_EMAIL).count() == 1
    assert Meal.query.count() == 3
    assert ShoppingListItem.query.count() == 3

    r = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert r.status_code == 200
    headers = {"Authorization": f"Bearer {r.get_json()['token']}"}
    food = client.get("/api/food-logs", headers=headers).get_json()
    assert food["count"] == 4
    assert food["totals"]["calories"] == 1500.0
    sleep = client.get("/api/sleep-logs", headers=headers).get_json()
    assert sleep["sleepLogs"][0]["duration"] == 8.0
