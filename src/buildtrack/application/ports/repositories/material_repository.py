"""Material repository port."""

from __future__ import annotations

from typing import Protocol

from buildtrack.domain.entities import Material


class MaterialRepository(Protocol):
    """Port for material persistence."""

    async def list(self) -> list[Material]: ...

    async def create(self, material: Material) -> Material: ...

    async def total_quantity(self) -> int: ...
