"""Phase lifecycle status."""

from enum import StrEnum


class PhaseStatus(StrEnum):
    """Status of a project phase."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
