"""Remove permission use case."""

import logging
from uuid import UUID

from buildtrack.application.ports import PermissionChecker
from buildtrack.application.use_cases.permission.resolve import (
    resolve_permission,
    resolve_role,
)
from buildtrack.domain.entities import RolePermission
from buildtrack.domain.exceptions import PermissionDenied
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class RemovePermissionUseCase:
    """Withdraw a named permission from a role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, role_id: UUID, permission_name: str) -> None:
        """Remove permission from role. Removing a permission the role lacks is a no-op."""
        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_ROLES)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage roles")

        async with self._uow_factory() as uow:
            role = await resolve_role(uow, role_id)
            permission = await resolve_permission(uow, permission_name)
            removed = await uow.role_permissions.remove(RolePermission(role.id, permission.id))

        if removed:
            logger.info("Removed %r from role %s", permission.name, role.id)
