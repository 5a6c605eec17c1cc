"""Effective permissions of a role."""

from uuid import UUID

from buildtrack.application.use_cases.permission.resolve import resolve_role


class EffectivePermissionsUseCase:
    """Derive the permission names a role grants from its join rows.

    Inactive roles are resolved too, so history stays inspectable after
    deactivation.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> set[str]:
        async with self._uow_factory() as uow:
            role = await resolve_role(uow, role_id)
            return await uow.role_permissions.list_permission_names(role.id)
