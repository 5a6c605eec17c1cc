"""User DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class UserCreateInput:
    """Input for creating a user profile."""

    name: str
    email: str
    role_id: UUID | None
    project_id: UUID | None = None


@dataclass
class UserOutput:
    """User with role and project names resolved."""

    id: UUID
    name: str
    email: str
    role_id: UUID | None
    role_name: str
    project_id: UUID | None
    project_name: str
    active: bool
    created_at: datetime
