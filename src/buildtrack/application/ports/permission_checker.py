"""Permission checker port - RBAC authorization."""

from typing import Protocol


class PermissionChecker(Protocol):
    """Port for checking whether a user holds a named permission."""

    async def check(self, user_id: str, permission: str) -> bool: ...
