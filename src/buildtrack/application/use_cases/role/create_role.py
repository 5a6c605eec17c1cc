"""Create role use case."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from uuid import uuid4

from buildtrack.application.ports import PermissionChecker
from buildtrack.application.use_cases.permission.resolve import resolve_permission
from buildtrack.domain.entities import Role, RolePermission
from buildtrack.domain.exceptions import PermissionDenied, ValidationError
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create an active role, optionally granting initial permissions."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        name: str,
        initial_permissions: Iterable[str] = (),
    ) -> Role:
        """Create role named ``name``.

        Initial permissions are written as join rows in the same transaction,
        so an unknown permission name leaves no role behind.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Role name is required")

        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_ROLES)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage roles")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise ValidationError(f"Role '{name}' already exists")

            permissions = [
                await resolve_permission(uow, permission_name)
                for permission_name in sorted(set(initial_permissions))
            ]

            role = Role(
                id=uuid4(),
                name=name,
                is_active=True,
                created_at=datetime.now(UTC),
            )
            await uow.roles.create(role)
            for permission in permissions:
                await uow.role_permissions.add(RolePermission(role.id, permission.id))

        logger.info("Created role %r (%s)", role.name, role.id)
        return role
