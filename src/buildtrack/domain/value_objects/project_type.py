"""Project types."""

from enum import StrEnum


class ProjectType(StrEnum):
    """Kind of construction project."""

    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    INFRASTRUCTURE = "Infrastructure"
