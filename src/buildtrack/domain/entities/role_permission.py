"""Role-permission grant (join row)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class RolePermission:
    """Existence of the pair means the role grants the permission."""

    role_id: UUID
    permission_id: UUID
