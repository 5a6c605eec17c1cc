"""Permission catalog repository port."""

from typing import Protocol

from buildtrack.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for reading the permission catalog."""

    async def list_all(self) -> list[Permission]: ...

    async def get_by_name(self, name: str) -> Permission | None: ...
