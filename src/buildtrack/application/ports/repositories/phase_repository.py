"""Phase repository port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from buildtrack.domain.entities import Phase


class PhaseRepository(Protocol):
    """Port for phase persistence."""

    async def get_by_id(self, phase_id: UUID) -> Phase | None: ...

    async def list(self, *, project_id: UUID | None = None) -> list[Phase]: ...

    async def list_recent(self, limit: int) -> list[Phase]: ...

    async def create(self, phase: Phase) -> Phase: ...

    async def update(self, phase: Phase) -> None: ...

    async def delete(self, phase_id: UUID) -> None: ...
