from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from sqlalchemy.exc import OperationalError

from authportal.app import create_app
from authportal.infrastructure.container import Container
from authportal.infrastructure.db import ENGINE, Base, SessionLocal
from authportal.infrastructure.db.models import User
from authportal.infrastructure.sessions import InMemorySessionStore


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def app(clock: FakeClock) -> Flask:
    container = Container()
    container.session_store = InMemorySessionStore(
        ttl_seconds=container.config.session.ttl_seconds, clock=clock
    )
    return create_app(container)


def _signup(client, username: str = "alice", email: str = "a@x.com", password: str = "secret1"):
    return client.post(
        "/api/signup", json={"username": username, "email": email, "password": password}
    )


def test_signup_login_check_logout_flow(app: Flask) -> None:
    with app.test_client() as client:
        signup = _signup(client)
        assert signup.status_code == 201
        assert signup.get_json()["userId"] == 1

        login = client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
        assert login.status_code == 200
        assert login.get_json()["username"] == "alice"
        assert client.get_cookie("sid") is not None

        check = client.get("/api/check-auth")
        assert check.get_json() == {"authenticated": True, "username": "alice"}

        logout = client.get("/api/logout")
        assert logout.status_code == 200
        assert logout.get_json()["success"] is True

        check = client.get("/api/check-auth")
        assert check.get_json() == {"authenticated": False}

    session = SessionLocal()
    try:
        row = session.query(User).one()
        assert row.username == "alice"
        assert row.password_hash != "secret1"
    finally:
        session.close()


def test_destroyed_token_stays_invalid(app: Flask) -> None:
    with app.test_client() as client:
        _signup(client)
        client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
        token = client.get_cookie("sid").value
        client.get("/api/logout")

        client.set_cookie("sid", token)
        assert client.get("/api/check-auth").get_json() == {"authenticated": False}


def test_duplicate_signup_is_rejected(app: Flask) -> None:
    with app.test_client() as client:
        assert _signup(client).status_code == 201

        same_email = _signup(client, username="bob")
        same_username = _signup(client, email="b@x.com")

    assert same_email.status_code == 409
    assert same_username.status_code == 409
    assert same_email.get_json()["message"] == "User already exists"


def test_unique_constraint_rejects_race_past_precheck(app: Flask) -> None:
    container: Container = app.extensions["authportal.container"]
    container.user_repository.add("alice", "a@x.com", "hash")

    from authportal.domain.users.exceptions import UserAlreadyExistsError

    with pytest.raises(UserAlreadyExistsError):
        container.user_repository.add("alice2", "a@x.com", "hash")


def test_missing_fields_return_400(app: Flask) -> None:
    with app.test_client() as client:
        signup = client.post("/api/signup", json={"username": "alice"})
        login = client.post("/api/login", json={"email": "a@x.com"})

    assert signup.status_code == 400
    assert signup.get_json()["message"] == "All fields are required"
    assert login.status_code == 400
    assert login.get_json()["message"] == "Email and password are required"


def test_bad_credentials_are_indistinguishable(app: Flask) -> None:
    with app.test_client() as client:
        _signup(client)
        wrong_password = client.post("/api/login", json={"email": "a@x.com", "password": "x"})
        unknown_email = client.post("/api/login", json={"email": "z@x.com", "password": "secret1"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json()


def test_session_expires_after_one_hour(app: Flask, clock: FakeClock) -> None:
    with app.test_client() as client:
        _signup(client)
        client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})

        clock.now += timedelta(minutes=59)
        assert client.get("/api/check-auth").get_json()["authenticated"] is True

        clock.now += timedelta(minutes=1)
        assert client.get("/api/check-auth").get_json() == {"authenticated": False}


def test_dashboard_requires_session(app: Flask) -> None:
    with app.test_client() as client:
        anonymous = client.get("/dashboard")
        assert anonymous.status_code == 302
        assert anonymous.headers["Location"] == "/"

        _signup(client)
        client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
        authed = client.get("/dashboard")
        assert authed.status_code == 200
        assert b"Dashboard" in authed.data


def test_public_pages_are_served(app: Flask) -> None:
    with app.test_client() as client:
        index = client.get("/")
        signup = client.get("/signup")

    assert index.status_code == 200
    assert b"Log in" in index.data
    assert signup.status_code == 200
    assert b"Sign up" in signup.data


def test_health_and_security_headers(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok", "sessions": 0}
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"]


def test_health_reports_unreachable_database(app: Flask, monkeypatch: pytest.MonkeyPatch) -> None:
    def _down() -> None:
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(
        "authportal.interfaces.http.controllers.misc_controller.check_database", _down
    )
    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {
        "ok": False,
        "database": "error: OperationalError",
        "sessions": 0,
    }


def test_signup_accepts_long_fields(app: Flask) -> None:
    username = "u" * 300
    email = "e" * 300 + "@x.com"
    password = "p" * 300
    with app.test_client() as client:
        signup = _signup(client, username=username, email=email, password=password)
        login = client.post("/api/login", json={"email": email, "password": password})

    assert signup.status_code == 201
    assert login.status_code == 200
    assert login.get_json()["username"] == username
