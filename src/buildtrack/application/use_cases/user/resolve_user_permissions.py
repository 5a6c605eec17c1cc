"""Resolve effective permissions of a user through their role."""

from uuid import UUID

from buildtrack.domain.exceptions import NotFound


class ResolveUserPermissionsUseCase:
    """Effective permissions of a user. A user without a role has none."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: UUID) -> set[str]:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            if user.role_id is None:
                return set()
            return await uow.role_permissions.list_permission_names(user.role_id)
