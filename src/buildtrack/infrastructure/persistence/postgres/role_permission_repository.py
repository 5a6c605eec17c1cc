"""PostgreSQL role-permission join repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from buildtrack.domain.entities import RolePermission


class PostgresRolePermissionRepository:
    """Role-permission grants backed by the role_permission table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def add(self, grant: RolePermission) -> bool:
        """Insert the pair. Returns False when it already existed."""
        cur = await self._conn.execute(
            "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s) "
            "ON CONFLICT (role_id, permission_id) DO NOTHING",
            (grant.role_id, grant.permission_id),
        )
        return cur.rowcount == 1

    async def remove(self, grant: RolePermission) -> bool:
        """Delete the pair. Returns False when it was absent."""
        cur = await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s AND permission_id = %s",
            (grant.role_id, grant.permission_id),
        )
        return cur.rowcount == 1

    async def list_permission_names(self, role_id: UUID) -> set[str]:
        """Names of all permissions granted to the role."""
        cur = await self._conn.execute(
            "SELECT p.name FROM role_permission rp "
            "JOIN permission p ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}
