"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from buildtrack.domain.entities import Role
from buildtrack.domain.exceptions import ValidationError
from buildtrack.domain.value_objects import RoleOrder

_COLUMNS = "id, name, is_active, created_at"

_ORDER_CLAUSES = {
    RoleOrder.NEWEST: "created_at DESC",
    RoleOrder.NAME: "name",
}


def _row_to_role(r: tuple) -> Role:
    return Role(id=r[0], name=r[1], is_active=r[2], created_at=r[3])


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id, active or not."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_active(self, order_by: RoleOrder = RoleOrder.NEWEST) -> list[Role]:
        """List roles with is_active set."""
        order = _ORDER_CLAUSES[RoleOrder(order_by)]
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE is_active ORDER BY {order}"
        )
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def create(self, role: Role) -> Role:
        """Create role. A concurrent insert of the same name is a ValidationError."""
        try:
            await self._conn.execute(
                "INSERT INTO role (id, name, is_active, created_at) VALUES (%s, %s, %s, %s)",
                (role.id, role.name, role.is_active, role.created_at),
            )
        except UniqueViolation as e:
            raise ValidationError(f"Role '{role.name}' already exists") from e
        return role

    async def update(self, role: Role) -> None:
        """Overwrite role name."""
        try:
            await self._conn.execute(
                "UPDATE role SET name = %s WHERE id = %s",
                (role.name, role.id),
            )
        except UniqueViolation as e:
            raise ValidationError(f"Role '{role.name}' already exists") from e

    async def deactivate(self, role_id: UUID) -> None:
        """Soft delete role."""
        await self._conn.execute(
            "UPDATE role SET is_active = false WHERE id = %s",
            (role_id,),
        )
