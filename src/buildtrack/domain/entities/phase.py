"""Phase entity - a stage of a project."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from buildtrack.domain.value_objects import PhaseStatus


@dataclass
class Phase:
    """Project phase."""

    id: UUID
    project_id: UUID
    name: str
    status: PhaseStatus = PhaseStatus.NOT_STARTED
    start_date: date | None = None
    end_date: date | None = None
