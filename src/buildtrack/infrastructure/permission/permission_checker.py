"""Permission checker implementation - checks a user's role grants."""

import logging
from uuid import UUID

logger = logging.getLogger(__name__)


class RoleBasedPermissionChecker:
    """Grants a permission when the user's active role holds it.

    With ``enforce=False`` every check passes, matching deployments that rely
    on database row-level policies alone.
    """

    def __init__(self, unit_of_work_factory: type, enforce: bool = False) -> None:
        self._uow_factory = unit_of_work_factory
        self._enforce = enforce

    async def check(self, user_id: str, permission: str) -> bool:
        """Check if user holds the named permission."""
        if not self._enforce:
            return True

        try:
            uid = UUID(user_id)
        except (TypeError, ValueError):
            logger.debug("Subject %r is not a profile id", user_id)
            return False

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(uid)
            if not user or not user.active or user.role_id is None:
                return False

            role = await uow.roles.get_by_id(user.role_id)
            if not role or not role.is_active:
                return False

            granted = await uow.role_permissions.list_permission_names(role.id)

        return str(permission) in granted
