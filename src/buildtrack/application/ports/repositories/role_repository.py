"""Role repository port."""

from typing import Protocol
from uuid import UUID

from buildtrack.domain.entities import Role
from buildtrack.domain.value_objects import RoleOrder


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_active(self, order_by: RoleOrder = RoleOrder.NEWEST) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def deactivate(self, role_id: UUID) -> None: ...
