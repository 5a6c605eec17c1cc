"""User profile entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User profile - references at most one role."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    role_id: UUID | None = None
    project_id: UUID | None = None
    active: bool = True
    phone: str | None = None
