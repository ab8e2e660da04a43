"""
Tests for token handling, the auth dependencies and /auth endpoints.
"""

from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from starlette.requests import Request

from app.core.config import Settings, get_settings
from app.core.deps import (
    authenticate_jwt,
    ensure_admin,
    ensure_admin_or_correct_user,
    ensure_logged_in,
)
from app.core.errors import UnauthorizedError
from app.core.security import TokenPayload, create_token, decode_token


def make_request():
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


def bearer(token):
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestAuthenticateJwt:
    """Tests for the authenticate step"""

    def test_valid_token_sets_identity(self, u1_token):
        request = make_request()

        user = authenticate_jwt(request, bearer(u1_token), get_settings())

        assert user == TokenPayload(username="u1", isAdmin=False)
        assert request.state.user == user

    def test_no_header_leaves_identity_empty(self):
        request = make_request()

        assert authenticate_jwt(request, None, get_settings()) is None
        assert request.state.user is None

    def test_bad_signature_is_not_an_error(self):
        other = Settings(SECRET_KEY="not-the-secret")
        token = create_token("u1", True, other)
        request = make_request()

        assert authenticate_jwt(request, bearer(token), get_settings()) is None
        assert request.state.user is None

    def test_expired_token_is_not_an_error(self):
        token = create_token("u1", False, get_settings(), expires_delta=timedelta(seconds=-10))
        request = make_request()

        assert authenticate_jwt(request, bearer(token), get_settings()) is None

    def test_garbage_token_is_not_an_error(self):
        assert authenticate_jwt(make_request(), bearer("not.a.jwt"), get_settings()) is None


class TestGates:
    """Tests for ensure_logged_in / ensure_admin / ensure_admin_or_correct_user"""

    def test_logged_in_requires_identity(self):
        with pytest.raises(UnauthorizedError):
            ensure_logged_in(None)

    def test_logged_in_passes_any_user(self):
        user = TokenPayload(username="u1", isAdmin=False)
        assert ensure_logged_in(user) is user

    def test_admin_rejects_non_admin(self):
        with pytest.raises(UnauthorizedError):
            ensure_admin(TokenPayload(username="u1", isAdmin=False))

    def test_admin_passes_admin(self):
        user = TokenPayload(username="admin", isAdmin=True)
        assert ensure_admin(ensure_logged_in(user)) is user

    def test_admin_or_correct_user(self):
        u1 = TokenPayload(username="u1", isAdmin=False)
        admin = TokenPayload(username="admin", isAdmin=True)

        assert ensure_admin_or_correct_user("u1", u1) is u1
        assert ensure_admin_or_correct_user("u1", admin) is admin
        with pytest.raises(UnauthorizedError):
            ensure_admin_or_correct_user("u2", u1)


class TestTokens:
    """Tests for create_token / decode_token"""

    def test_round_trip_claims(self):
        payload = decode_token(create_token("admin", True))

        assert payload.username == "admin"
        assert payload.isAdmin is True


class TestAuthEndpoints:
    """Tests for /auth/token and /auth/register"""

    def test_token_for_valid_credentials(self, client):
        response = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert response.status_code == 200
        payload = decode_token(response.json()["token"])
        assert payload == TokenPayload(username="u1", isAdmin=False)

    def test_token_wrong_password(self, client):
        response = client.post("/auth/token", json={"username": "u1", "password": "nope"})
        assert response.status_code == 401

    def test_token_unknown_user(self, client):
        response = client.post("/auth/token", json={"username": "nobody", "password": "password1"})
        assert response.status_code == 401

    def test_token_missing_fields(self, client):
        response = client.post("/auth/token", json={"username": "u1"})
        assert response.status_code == 400

    def test_register(self, client):
        response = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "new@email.com",
        })

        assert response.status_code == 201
        payload = decode_token(response.json()["token"])
        assert payload == TokenPayload(username="new", isAdmin=False)

    def test_register_cannot_request_admin(self, client):
        response = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "new@email.com",
            "isAdmin": True,
        })
        assert response.status_code == 400

    def test_register_duplicate(self, client):
        response = client.post("/auth/register", json={
            "username": "u1",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "new@email.com",
        })
        assert response.status_code == 400

    def test_lowercase_bearer_scheme_accepted(self, client, admin_token):
        response = client.get("/users", headers={"Authorization": f"bearer {admin_token}"})
        assert response.status_code == 200
