"""Unit tests for auth and CORS middleware."""

from unittest.mock import MagicMock

import falcon.asgi
import pytest
from falcon.testing import TestClient

from buildtrack.infrastructure.auth.keycloak_provider import OIDCUser
from buildtrack.interfaces.api.middleware.auth import AuthMiddleware
from buildtrack.interfaces.api.middleware.cors import CORSMiddleware


class _WhoAmI:
    async def on_get(self, req, resp) -> None:
        user = getattr(req.context, "user", None)
        resp.media = {"user_id": user.user_id if user else None}


def _client(*middleware) -> TestClient:
    app = falcon.asgi.App(middleware=list(middleware))
    app.add_route("/whoami", _WhoAmI())
    return TestClient(app)


@pytest.fixture
def keycloak() -> MagicMock:
    provider = MagicMock()
    provider.decode_token.side_effect = lambda token: (
        OIDCUser(user_id="user-42", email="ann@example.com", username="ann")
        if token == "good"
        else None
    )
    return provider


def test_valid_bearer_token_sets_user(keycloak: MagicMock) -> None:
    result = _client(AuthMiddleware(keycloak)).simulate_get(
        "/whoami", headers={"Authorization": "Bearer good"}
    )
    assert result.json == {"user_id": "user-42"}
    keycloak.decode_token.assert_called_once_with("good")


def test_invalid_bearer_token_clears_user(keycloak: MagicMock) -> None:
    result = _client(AuthMiddleware(keycloak)).simulate_get(
        "/whoami", headers={"Authorization": "Bearer forged"}
    )
    assert result.json == {"user_id": None}


def test_bearer_token_without_provider_clears_user() -> None:
    result = _client(AuthMiddleware(None)).simulate_get(
        "/whoami", headers={"Authorization": "Bearer good"}
    )
    assert result.json == {"user_id": None}


def test_missing_header_leaves_no_user(keycloak: MagicMock) -> None:
    result = _client(AuthMiddleware(keycloak)).simulate_get("/whoami")
    assert result.json == {"user_id": None}
    keycloak.decode_token.assert_not_called()


def test_non_bearer_scheme_leaves_no_user(keycloak: MagicMock) -> None:
    result = _client(AuthMiddleware(keycloak)).simulate_get(
        "/whoami", headers={"Authorization": "Basic YWRtaW46YWRtaW4="}
    )
    assert result.json == {"user_id": None}
    keycloak.decode_token.assert_not_called()


def test_cors_allowed_origin_echoed() -> None:
    client = _client(CORSMiddleware(["http://localhost:5173"]))
    result = client.simulate_get("/whoami", headers={"Origin": "http://localhost:5173"})
    assert result.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_cors_unknown_origin_not_echoed() -> None:
    client = _client(CORSMiddleware(["http://localhost:5173"]))
    result = client.simulate_get("/whoami", headers={"Origin": "http://evil.test"})
    assert "Access-Control-Allow-Origin" not in result.headers


def test_cors_wildcard_allows_any_origin() -> None:
    client = _client(CORSMiddleware(["*"]))
    result = client.simulate_get("/whoami", headers={"Origin": "http://anywhere.test"})
    assert result.headers["Access-Control-Allow-Origin"] == "http://anywhere.test"


def test_cors_preflight_short_circuits() -> None:
    client = _client(CORSMiddleware(["http://localhost:5173"]))
    result = client.simulate_options(
        "/whoami", headers={"Origin": "http://localhost:5173"}
    )
    assert result.status_code == 204
    assert "PATCH" in result.headers["Access-Control-Allow-Methods"]
