"""Fixtures for API tests."""

import pytest

from buildtrack.interfaces.api.app import create_app
from buildtrack.main import build_resources

from tests.conftest import FakeUnitOfWork


class _TestUser:
    user_id = "test-user-1"


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing."""

    async def process_request(self, req, resp):
        req.context.user = _TestUser()


@pytest.fixture
def seeded_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Shared UoW with a couple of roles - the same one serves every request in a test."""
    for name in ("Admin", "Accountant", "Site Engineer"):
        fake_uow.roles.add_role(name)
    return fake_uow


@pytest.fixture
def app(seeded_uow, uow_factory, mock_permission_checker):
    """Falcon ASGI app wired the same way the composition root does it."""
    return create_app(
        build_resources(uow_factory, mock_permission_checker),
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
