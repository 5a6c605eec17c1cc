"""Lookups shared by the role and assignment use cases."""

import logging
from uuid import UUID

from buildtrack.application.ports import UnitOfWork
from buildtrack.domain.entities import Permission, Role
from buildtrack.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


async def resolve_role(uow: UnitOfWork, role_id: UUID) -> Role:
    """Return the role or raise NotFound."""
    role = await uow.roles.get_by_id(role_id)
    if role is None:
        logger.warning("Role %s does not exist", role_id)
        raise NotFound("Role", str(role_id))
    return role


async def resolve_permission(uow: UnitOfWork, name: str) -> Permission:
    """Return the catalog entry for a permission name or raise NotFound."""
    permission = await uow.permissions.get_by_name(name)
    if permission is None:
        logger.warning("Permission %r is not in the catalog", name)
        raise NotFound("Permission", name)
    return permission
