"""Role entity for RBAC."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permissions; deactivated instead of deleted."""

    id: UUID
    name: str
    is_active: bool
    created_at: datetime
