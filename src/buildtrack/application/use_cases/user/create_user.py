"""Create user use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from buildtrack.application.dto.user_dto import UserCreateInput
from buildtrack.application.ports import PermissionChecker
from buildtrack.application.use_cases.permission.resolve import resolve_role
from buildtrack.domain.entities import User
from buildtrack.domain.exceptions import NotFound, PermissionDenied, ValidationError
from buildtrack.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Create an active user profile bound to one role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, data: UserCreateInput) -> User:
        """Create user. Name, email and role are required."""
        name = (data.name or "").strip()
        email = (data.email or "").strip().lower()
        if not name or not email or data.role_id is None:
            raise ValidationError("Name, email and role are required")

        allowed = await self._permission_checker.check(actor_id, PermissionName.MANAGE_USERS)
        if not allowed:
            raise PermissionDenied("User is not allowed to manage users")

        async with self._uow_factory() as uow:
            role = await resolve_role(uow, data.role_id)
            if not role.is_active:
                raise ValidationError(f"Role '{role.name}' is not active")
            if data.project_id is not None and not await uow.projects.get_by_id(data.project_id):
                raise NotFound("Project", str(data.project_id))
            if await uow.users.get_by_email(email):
                raise ValidationError(f"User with email {email} already exists")

            user = User(
                id=uuid4(),
                name=name,
                email=email,
                role_id=role.id,
                project_id=data.project_id,
                active=True,
                created_at=datetime.now(UTC),
            )
            await uow.users.create(user)

        logger.info("Created user %s with role %r", user.id, role.name)
        return user
