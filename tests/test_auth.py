import datetime as dt

import jwt

from conftest import register


def test_register_returns_user_and_token(client):
    r = client.post("/api/auth/register", json={
        "email": "New.User@Example.com", "password": "secret123", "name": "New User"
    })
    assert r.status_code == 201, r.data
    body = r.get_json()
    assert body["user"]["email"] == "new.user@example.com"
    assert body["user"]["name"] == "New User"
    assert body["token"]
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]
    assert "secret123" not in r.get_data(as_text=True)


def test_register_duplicate_email_conflicts(client, alice):
    r = client.post("/api/auth/register", json={
        "email": "alice@example.com", "password": "another123", "name": "Alice Again"
    })
    assert r.status_code == 409
    assert r.get_json()["error"] == "User with this email already exists"


def test_register_validation_details(client):
    r = client.post("/api/auth/register", json={"email": "not-an-email", "password": "short"})
    assert r.status_code == 400
    body = r.get_json()
    assert body["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["details"]}
    assert {"email", "password", "name"} <= fields


def test_login_and_me(client, alice):
    user, _ = alice
    r = client.post("/api/auth/login", json={"email": "ALICE@example.com", "password": "secret123"})
    assert r.status_code == 200, r.data
    body = r.get_json()
    assert body["user"]["id"] == user["id"]
    assert "password" not in body["user"]

    r2 = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert r2.status_code == 200
    assert r2.get_json()["user"] == user


def test_login_wrong_password(client, alice):
    r = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrongpass"})
    assert r.status_code == 401
    assert r.get_json()["error"] == "Invalid email or password"

    r2 = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert r2.status_code == 401


def test_me_requires_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.get_json()["error"] == "Missing Bearer token"


def test_invalid_signature_rejected(client, alice):
    user, _ = alice
    forged = jwt.encode({"sub": str(user["id"]), "email": user["email"]}, "other-secret", algorithm="HS256")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401
    assert r.get_json()["code"] == "INVALID_TOKEN"


def test_expired_token_rejected(client, app, alice):
    user, _ = alice
    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=1)
    expired = jwt.encode(
        {"sub": str(user["id"]), "email": user["email"], "exp": int(past.timestamp())},
        app.config["JWT_SECRET"],
        algorithm="HS256",
    )
    r = client.get("/api/food-logs", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.get_json()["error"] == "Token expired"


def test_token_for_deleted_user_is_not_found(client, app):
    from healthstack.extensions import db
    from healthstack.models import User

    user, headers = register(client, "ghost@example.com")
    db.session.delete(db.session.get(User, user["id"]))
    db.session.commit()
    r = client.get("/api/auth/me", headers=headers)
    assert r.status_code == 404


def test_logout(client):
    r = client.post("/api/auth/logout")
    assert r.status_code == 200
    assert r.get_json()["message"] == "Logged out successfully"


def test_register_blank_name_rejected(client):
    r = client.post("/api/auth/register", json={
        "email": "blank@example.com", "password": "secret123", "name": "   "
    })
    assert r.status_code == 400
    assert r.get_json()["details"] == [{"field": "name", "message": "Name is required"}]


def test_login_unknown_email_still_checks_a_hash(client, monkeypatch):
    from healthstack.services import auth_service

    checked = []
    real_verify = auth_service.verify_password

    def spy(plain, password_hash):
        checked.append(password_hash)
        return real_verify(plain, password_hash)

    monkeypatch.setattr(auth_service, "verify_password", spy)
    r = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert r.status_code == 401
    assert r.get_json()["error"] == "Invalid email or password"
    assert len(checked) == 1
    assert checked[0].startswith("scrypt:")
