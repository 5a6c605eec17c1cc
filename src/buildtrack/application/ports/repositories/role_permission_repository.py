"""Role-permission join repository port."""

from typing import Protocol
from uuid import UUID

from buildtrack.domain.entities import RolePermission


class RolePermissionRepository(Protocol):
    """Port for role-permission grants."""

    async def add(self, grant: RolePermission) -> bool: ...

    async def remove(self, grant: RolePermission) -> bool: ...

    async def list_permission_names(self, role_id: UUID) -> set[str]: ...
