"""Update user use case."""

from uuid import UUID

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import User
from buildtrack.domain.exceptions import NotFound, PermissionDenied, ValidationError
from buildtrack.domain.value_objects import PermissionName


class UpdateUserUseCase:
    """Rename a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: UUID, name: str) -> User:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")

        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_USERS)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage users")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            user.name = name
            await uow.users.update(user)
            return user
