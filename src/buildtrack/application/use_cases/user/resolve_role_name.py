"""Resolve role display name."""

from uuid import UUID

from buildtrack.application.use_cases.permission.resolve import resolve_role


class ResolveRoleNameUseCase:
    """Map a role id to its display name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> str:
        async with self._uow_factory() as uow:
            role = await resolve_role(uow, role_id)
            return role.name
