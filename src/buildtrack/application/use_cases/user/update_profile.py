"""Update own profile use case."""

import logging
from uuid import UUID

from buildtrack.domain.entities import User
from buildtrack.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """Let a user change their own display name and phone.

    Role, project and email stay with the user administration endpoints, so no
    permission check applies here.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        user_id: UUID,
        name: str | None = None,
        phone: str | None = None,
    ) -> User:
        """Apply the given fields; ``None`` leaves a field unchanged, an empty phone clears it."""
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Name is required")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user or not user.active:
                raise NotFound("User", str(user_id))
            if name is not None:
                user.name = name
            if phone is not None:
                user.phone = phone.strip() or None
            await uow.users.update(user)

        logger.info("User %s updated own profile", user_id)
        return user
