"""Project entity."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from buildtrack.domain.value_objects import ProjectType


@dataclass
class Project:
    """Construction project with optional manager."""

    id: UUID
    name: str
    type: ProjectType
    created_at: datetime
    location: str | None = None
    manager_id: UUID | None = None
    start_date: date | None = None
    end_date: date | None = None
