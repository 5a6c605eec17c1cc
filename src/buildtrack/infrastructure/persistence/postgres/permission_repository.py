"""PostgreSQL permission catalog repository implementation."""

from psycopg import AsyncConnection

from buildtrack.domain.entities import Permission


class PostgresPermissionRepository:
    """Permission catalog repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[Permission]:
        """List the whole catalog ordered by name."""
        cur = await self._conn.execute("SELECT id, name FROM permission ORDER BY name")
        rows = await cur.fetchall()
        return [Permission(id=r[0], name=r[1]) for r in rows]

    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by name."""
        cur = await self._conn.execute(
            "SELECT id, name FROM permission WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Permission(id=r[0], name=r[1])
