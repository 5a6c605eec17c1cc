"""Unit tests for domain exceptions."""

import pytest

from buildtrack.domain.exceptions import (
    BuildTrackError,
    GatewayError,
    NotFound,
    PermissionDenied,
    ValidationError,
)


def test_permission_denied_inherits_buildtrack_error() -> None:
    """PermissionDenied is a subclass of BuildTrackError."""
    assert issubclass(PermissionDenied, BuildTrackError)


def test_not_found_inherits_buildtrack_error() -> None:
    """NotFound is a subclass of BuildTrackError."""
    assert issubclass(NotFound, BuildTrackError)


def test_validation_error_inherits_buildtrack_error() -> None:
    """ValidationError is a subclass of BuildTrackError."""
    assert issubclass(ValidationError, BuildTrackError)


def test_gateway_error_inherits_buildtrack_error() -> None:
    """GatewayError is a subclass of BuildTrackError."""
    assert issubclass(GatewayError, BuildTrackError)


def test_raise_not_found_catchable_as_buildtrack_error() -> None:
    """NotFound can be caught as BuildTrackError."""
    with pytest.raises(BuildTrackError):
        raise NotFound("Role", "123")


def test_not_found_keeps_entity_and_key() -> None:
    """NotFound exposes the entity kind and the key that missed."""
    err = NotFound("Permission", "Fly Drones")
    assert err.entity == "Permission"
    assert err.key == "Fly Drones"
    assert str(err) == "Permission not found: Fly Drones"


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "connection refused"
    with pytest.raises(GatewayError, match=msg):
        raise GatewayError(msg)
