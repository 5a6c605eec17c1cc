"""User profile repository port."""

from typing import Protocol
from uuid import UUID

from buildtrack.domain.entities import User


class UserRepository(Protocol):
    """Port for user profile persistence."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list_active(self) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...

    async def deactivate(self, user_id: UUID) -> None: ...

    async def reassign_role(self, from_role_id: UUID, to_role_id: UUID | None) -> int: ...
