"""PostgreSQL project repository implementation."""

from __future__ import annotations

from uuid import UUID

from psycopg import AsyncConnection

from buildtrack.domain.entities import Project
from buildtrack.domain.value_objects import ProjectType

_COLUMNS = "id, name, type, location, manager_id, start_date, end_date, created_at"


def _row_to_project(r: tuple) -> Project:
    return Project(
        id=r[0],
        name=r[1],
        type=ProjectType(r[2]),
        location=r[3],
        manager_id=r[4],
        start_date=r[5],
        end_date=r[6],
        created_at=r[7],
    )


class PostgresProjectRepository:
    """Project repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, project_id: UUID) -> Project | None:
        """Get project by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM project WHERE id = %s",
            (project_id,),
        )
        r = await cur.fetchone()
        return _row_to_project(r) if r else None

    async def list(self, *, search: str | None = None) -> list[Project]:
        """List projects newest first, optionally matching name or location."""
        where = ""
        params: tuple = ()
        if search:
            where = " WHERE name ILIKE %s OR location ILIKE %s"
            pattern = f"%{search}%"
            params = (pattern, pattern)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM project{where} ORDER BY created_at DESC",
            params,
        )
        rows = await cur.fetchall()
        return [_row_to_project(r) for r in rows]

    async def create(self, project: Project) -> Project:
        """Create project."""
        await self._conn.execute(
            f"INSERT INTO project ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                project.id,
                project.name,
                project.type.value,
                project.location,
                project.manager_id,
                project.start_date,
                project.end_date,
                project.created_at,
            ),
        )
        return project

    async def update(self, project: Project) -> None:
        """Update project."""
        await self._conn.execute(
            "UPDATE project SET name=%s, type=%s, location=%s, manager_id=%s, "
            "start_date=%s, end_date=%s WHERE id=%s",
            (
                project.name,
                project.type.value,
                project.location,
                project.manager_id,
                project.start_date,
                project.end_date,
                project.id,
            ),
        )
