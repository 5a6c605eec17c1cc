"""Deactivate user use case."""

import logging
from uuid import UUID

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.exceptions import NotFound, PermissionDenied
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class DeactivateUserUseCase:
    """Soft-delete a user profile."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: UUID) -> None:
        """Set active=false. Repeating the call is a no-op."""
        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_USERS)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage users")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            if user.active:
                await uow.users.deactivate(user_id)
                logger.info("Deactivated user %s", user_id)
