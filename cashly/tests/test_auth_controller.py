from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask

from cashly.application.services.auth_service import AuthService
from cashly.application.services.password_hashing import HmacSha512PasswordHasher
from cashly.application.services.token_issuer import JwtTokenIssuer
from cashly.domain.users.entities import User
from cashly.interfaces.http.controllers.auth_controller import AuthController
from cashly.shared.middleware.error_handler import configure_error_handling
from cashly.tests.fakes import InMemoryUserRepository


@pytest.fixture()
def flask_app(users: InMemoryUserRepository, token_issuer: JwtTokenIssuer) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app, debug_mode=False)
    service = AuthService(
        users=users, password_hasher=HmacSha512PasswordHasher(), tokens=token_issuer
    )
    controller = AuthController(auth_service=service, tokens=token_issuer)
    app.register_blueprint(controller.as_blueprint())
    return app


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _register_and_login(client, username: str = "alice", password: str = "pass1") -> str:
    client.post("/api/auth/register", json={"username": username, "password": password})
    return client.post(
        "/api/auth/login", json={"username": username, "password": password}
    ).get_json()["data"]


def test_register_returns_envelope(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "alice", "password": "pass1"}
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "message": "Welcome to Cashly!",
        "data": 1,
        "code": None,
    }


def test_register_duplicate_is_bad_request(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        client.post("/api/auth/register", json={"username": "alice", "password": "pass1"})
        response = client.post(
            "/api/auth/register", json={"username": "ALICE", "password": "pass1"}
        )

    assert response.status_code == 400
    assert response.get_json()["code"] == "username_taken"


def test_login_invalid_payload_returns_422(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "alice"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert "password" in payload["context"]["fields"]


def test_login_unknown_user_is_not_found(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "bob", "password": "pass1"})

    assert response.status_code == 404
    assert response.get_json()["data"] is None


def test_change_password_requires_bearer_token(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.post("/api/auth/change-password", json={"password": "pass2"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"


def test_change_password_with_token(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        token = _register_and_login(client)
        response = client.post(
            "/api/auth/change-password", json={"password": "pass2"}, headers=_bearer(token)
        )
        relogin = client.post("/api/auth/login", json={"username": "alice", "password": "pass2"})

    assert response.status_code == 200
    assert response.get_json()["message"] == "Password has changed."
    assert relogin.status_code == 200


def test_expired_token_is_unauthorized(flask_app: Flask, token_secret: str) -> None:
    stale = JwtTokenIssuer(
        token_secret, clock=lambda: datetime.now(UTC) - timedelta(days=2)
    ).issue(User(id=1, username="alice", password_hash=b"", password_salt=b""))

    with flask_app.test_client() as client:
        _register_and_login(client)
        response = client.post(
            "/api/auth/change-username", json={"username": "alicia"}, headers=_bearer(stale)
        )

    assert response.status_code == 401
    assert response.get_json()["context"]["reason"] == "token_expired"


def test_token_signed_with_other_secret_is_unauthorized(flask_app: Flask) -> None:
    forged = JwtTokenIssuer("z" * 64).issue(
        User(id=1, username="alice", password_hash=b"", password_salt=b"")
    )

    with flask_app.test_client() as client:
        _register_and_login(client)
        response = client.post(
            "/api/auth/change-username", json={"username": "alicia"}, headers=_bearer(forged)
        )

    assert response.status_code == 401
    assert response.get_json()["context"]["reason"] == "invalid_token"


def test_change_username_with_token(flask_app: Flask, users: InMemoryUserRepository) -> None:
    with flask_app.test_client() as client:
        token = _register_and_login(client)
        response = client.post(
            "/api/auth/change-username", json={"username": "alicia"}, headers=_bearer(token)
        )

    assert response.status_code == 200
    assert users.find_by_id(1).username == "alicia"


def test_delete_user_only_for_self(flask_app: Flask, users: InMemoryUserRepository) -> None:
    with flask_app.test_client() as client:
        token = _register_and_login(client)
        client.post("/api/auth/register", json={"username": "bob", "password": "pass1"})

        forbidden = client.delete("/api/auth/delete-user/2", headers=_bearer(token))
        deleted = client.delete("/api/auth/delete-user/1", headers=_bearer(token))

    assert forbidden.status_code == 403
    assert deleted.status_code == 200
    assert deleted.get_json()["data"] is True
    assert [u.username for u in users.all()] == ["bob"]


def test_persistence_failure_maps_to_500(
    flask_app: Flask, users: InMemoryUserRepository
) -> None:
    users.fail_with = RuntimeError("disk I/O error")

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "alice", "password": "pass1"}
        )

    assert response.status_code == 500
    assert response.get_json()["message"] == "disk I/O error"


def test_overlong_password_gets_length_message(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        register = client.post(
            "/api/auth/register", json={"username": "alice", "password": "a" * 200}
        )
        token = _register_and_login(client)
        change = client.post(
            "/api/auth/change-password", json={"password": "b" * 200}, headers=_bearer(token)
        )

    assert register.status_code == 400
    assert register.get_json()["message"] == "Password must be 4-20 characters!"
    assert change.status_code == 400
    assert change.get_json()["message"] == "Invalid password!"
