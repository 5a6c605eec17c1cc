"""Project repository port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from buildtrack.domain.entities import Project


class ProjectRepository(Protocol):
    """Port for project persistence."""

    async def get_by_id(self, project_id: UUID) -> Project | None: ...

    async def list(self, *, search: str | None = None) -> list[Project]: ...

    async def create(self, project: Project) -> Project: ...

    async def update(self, project: Project) -> None: ...
