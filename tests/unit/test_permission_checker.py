"""Unit tests for RoleBasedPermissionChecker."""

import pytest

from buildtrack.domain.entities import RolePermission
from buildtrack.domain.value_objects import PermissionName
from buildtrack.infrastructure.permission.permission_checker import (
    RoleBasedPermissionChecker,
)

from tests.conftest import FakeUnitOfWork


async def _grant(uow: FakeUnitOfWork, role_id, *names: str) -> None:
    for name in names:
        perm = await uow.permissions.get_by_name(name)
        await uow.role_permissions.add(RolePermission(role_id, perm.id))


@pytest.mark.asyncio
async def test_disabled_enforcement_always_grants(uow_factory) -> None:
    """With enforcement off any subject passes, even one without a profile."""
    checker = RoleBasedPermissionChecker(uow_factory)

    assert await checker.check("anonymous", PermissionName.MANAGE_ROLES) is True


@pytest.mark.asyncio
async def test_enforced_grant_through_role(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    role = fake_uow.roles.add_role("Admin")
    await _grant(fake_uow, role.id, "Manage Roles")
    user = fake_uow.users.add_user("Ann", role_id=role.id)
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check(str(user.id), PermissionName.MANAGE_ROLES) is True
    assert await checker.check(str(user.id), PermissionName.MANAGE_USERS) is False


@pytest.mark.asyncio
async def test_enforced_accepts_plain_string_permission(
    fake_uow: FakeUnitOfWork, uow_factory
) -> None:
    role = fake_uow.roles.add_role("Accountant")
    await _grant(fake_uow, role.id, "View Reports")
    user = fake_uow.users.add_user("Ann", role_id=role.id)
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check(str(user.id), "View Reports") is True


@pytest.mark.asyncio
async def test_enforced_denies_non_uuid_subject(uow_factory) -> None:
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check("anonymous", PermissionName.VIEW_REPORTS) is False


@pytest.mark.asyncio
async def test_enforced_denies_user_without_role(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    user = fake_uow.users.add_user("Ann")
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check(str(user.id), PermissionName.VIEW_REPORTS) is False


@pytest.mark.asyncio
async def test_enforced_denies_inactive_user(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    role = fake_uow.roles.add_role("Admin")
    await _grant(fake_uow, role.id, "View Reports")
    user = fake_uow.users.add_user("Ann", role_id=role.id, active=False)
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check(str(user.id), PermissionName.VIEW_REPORTS) is False


@pytest.mark.asyncio
async def test_enforced_denies_inactive_role(fake_uow: FakeUnitOfWork, uow_factory) -> None:
    """Grants of a deactivated role no longer authorize anything."""
    role = fake_uow.roles.add_role("Retired", is_active=False)
    await _grant(fake_uow, role.id, "View Reports")
    user = fake_uow.users.add_user("Ann", role_id=role.id)
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert await checker.check(str(user.id), PermissionName.VIEW_REPORTS) is False


@pytest.mark.asyncio
async def test_enforced_denies_unknown_user(uow_factory) -> None:
    checker = RoleBasedPermissionChecker(uow_factory, enforce=True)

    assert (
        await checker.check("00000000-0000-0000-0000-000000000000", PermissionName.VIEW_REPORTS)
        is False
    )
