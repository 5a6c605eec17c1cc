"""Sort orders for role listings."""

from enum import StrEnum


class RoleOrder(StrEnum):
    """How active roles are ordered."""

    NEWEST = "created_at"
    NAME = "name"
