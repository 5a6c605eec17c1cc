"""Deactivate role use case."""

import logging
from uuid import UUID

from buildtrack.application.ports import PermissionChecker
from buildtrack.application.use_cases.permission.resolve import resolve_role
from buildtrack.domain.exceptions import PermissionDenied, ValidationError
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class DeactivateRoleUseCase:
    """Soft-delete a role and move its users off it."""

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
        reassign_to: UUID | None = None,
    ) -> None:
        """Mark role inactive.

        Users holding the role are moved to ``reassign_to`` or, when it is
        None, left without a role. Grants are kept. Repeating the call is a
        no-op.
        """
        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_ROLES)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage roles")

        async with self._uow_factory() as uow:
            role = await resolve_role(uow, role_id)

            if reassign_to is not None:
                if reassign_to == role.id:
                    raise ValidationError("Cannot reassign users to the role being deactivated")
                target = await resolve_role(uow, reassign_to)
                if not target.is_active:
                    raise ValidationError(f"Role '{target.name}' is not active")

            moved = await uow.users.reassign_role(role.id, reassign_to)
            if role.is_active:
                await uow.roles.deactivate(role.id)

        logger.info(
            "Deactivated role %s, %d user(s) moved to %s", role.id, moved, reassign_to
        )
