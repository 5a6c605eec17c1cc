"""Permission entity - one atomic named capability from the catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Permission:
    """Permission - e.g. "Manage Materials"."""

    id: UUID
    name: str
