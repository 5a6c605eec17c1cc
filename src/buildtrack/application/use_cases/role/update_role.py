"""Update role use case."""

import logging
from collections.abc import Iterable
from uuid import UUID

from buildtrack.application.ports import PermissionChecker
from buildtrack.application.use_cases.permission.resolve import (
    resolve_permission,
    resolve_role,
)
from buildtrack.domain.entities import Role, RolePermission
from buildtrack.domain.exceptions import PermissionDenied, ValidationError
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Rename a role and optionally bring its grants in line with a new set."""

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
        role_id: UUID,
        name: str,
        permissions: Iterable[str] | None = None,
    ) -> Role:
        """Overwrite role name; when ``permissions`` is given, assign and remove
        one pair at a time until the role grants exactly that set.

        No version check: the last writer wins.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Role name is required")

        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_ROLES)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage roles")

        async with self._uow_factory() as uow:
            role = await resolve_role(uow, role_id)
            other = await uow.roles.get_by_name(name)
            if other and other.id != role.id:
                raise ValidationError(f"Role '{name}' already exists")

            role.name = name
            await uow.roles.update(role)

            if permissions is not None:
                wanted = set(permissions)
                current = await uow.role_permissions.list_permission_names(role.id)
                for permission_name in sorted(wanted - current):
                    permission = await resolve_permission(uow, permission_name)
                    await uow.role_permissions.add(RolePermission(role.id, permission.id))
                for permission_name in sorted(current - wanted):
                    permission = await resolve_permission(uow, permission_name)
                    await uow.role_permissions.remove(RolePermission(role.id, permission.id))

        logger.info("Updated role %s", role.id)
        return role
