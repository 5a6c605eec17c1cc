"""Health endpoint tests."""

from unittest.mock import AsyncMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from buildtrack.domain.exceptions import GatewayError
from buildtrack.interfaces.api.app import handle_gateway_error
from buildtrack.interfaces.api.resources.health import HealthResource

from tests.conftest import FakeUnitOfWork, make_uow_factory


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_error_handler(GatewayError, handle_gateway_error)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


def test_liveness_without_database() -> None:
    """Liveness answers even when no database is wired."""
    result = _client(HealthResource()).simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json == {"status": "ok"}


def test_ready_reads_permission_catalog(uow: FakeUnitOfWork) -> None:
    uow.permissions.list_all = AsyncMock(return_value=[])

    result = _client(HealthResource(make_uow_factory(uow))).simulate_get("/v1/health/ready")

    assert result.status_code == 200
    assert result.json == {"status": "ready"}
    uow.permissions.list_all.assert_awaited_once()


def test_ready_database_down_is_502(uow: FakeUnitOfWork) -> None:
    uow.permissions.list_all = AsyncMock(side_effect=GatewayError("connection refused"))

    result = _client(HealthResource(make_uow_factory(uow))).simulate_get("/v1/health/ready")

    assert result.status_code == 502
    assert result.json == {"error": "connection refused"}


def test_liveness_ignores_database_state(uow: FakeUnitOfWork) -> None:
    uow.permissions.list_all = AsyncMock(side_effect=GatewayError("connection refused"))

    result = _client(HealthResource(make_uow_factory(uow))).simulate_get("/v1/health")

    assert result.status_code == 200
