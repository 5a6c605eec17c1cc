"""PostgreSQL user profile repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from buildtrack.domain.entities import User

_COLUMNS = "id, name, email, role_id, project_id, active, created_at, phone"


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        name=r[1],
        email=r[2],
        role_id=r[3],
        project_id=r[4],
        active=r[5],
        created_at=r[6],
        phone=r[7],
    )


class PostgresUserRepository:
    """User profile repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM profile WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM profile WHERE email = %s",
            (email,),
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def list_active(self) -> list[User]:
        """List active users, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM profile WHERE active ORDER BY created_at DESC"
        )
        rows = await cur.fetchall()
        return [_row_to_user(r) for r in rows]

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            f"INSERT INTO profile ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.name,
                user.email,
                user.role_id,
                user.project_id,
                user.active,
                user.created_at,
                user.phone,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update user."""
        await self._conn.execute(
            "UPDATE profile SET name = %s, phone = %s, role_id = %s, project_id = %s "
            "WHERE id = %s",
            (user.name, user.phone, user.role_id, user.project_id, user.id),
        )

    async def deactivate(self, user_id: UUID) -> None:
        """Soft delete user."""
        await self._conn.execute(
            "UPDATE profile SET active = false WHERE id = %s",
            (user_id,),
        )

    async def reassign_role(self, from_role_id: UUID, to_role_id: UUID | None) -> int:
        """Point every user of one role at another (or at none). Returns rows moved."""
        cur = await self._conn.execute(
            "UPDATE profile SET role_id = %s WHERE role_id = %s",
            (to_role_id, from_role_id),
        )
        return cur.rowcount
