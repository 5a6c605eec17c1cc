"""PostgreSQL phase repository implementation."""

from __future__ import annotations

from uuid import UUID

from psycopg import AsyncConnection

from buildtrack.domain.entities import Phase
from buildtrack.domain.value_objects import PhaseStatus

_COLUMNS = "id, project_id, name, status, start_date, end_date"


def _row_to_phase(r: tuple) -> Phase:
    return Phase(
        id=r[0],
        project_id=r[1],
        name=r[2],
        status=PhaseStatus(r[3]),
        start_date=r[4],
        end_date=r[5],
    )


class PostgresPhaseRepository:
    """Phase repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, phase_id: UUID) -> Phase | None:
        """Get phase by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM phase WHERE id = %s",
            (phase_id,),
        )
        r = await cur.fetchone()
        return _row_to_phase(r) if r else None

    async def list(self, *, project_id: UUID | None = None) -> list[Phase]:
        """List phases by start date."""
        where = ""
        params: tuple = ()
        if project_id:
            where = " WHERE project_id = %s"
            params = (project_id,)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM phase{where} ORDER BY start_date NULLS LAST, name",
            params,
        )
        rows = await cur.fetchall()
        return [_row_to_phase(r) for r in rows]

    async def list_recent(self, limit: int) -> list[Phase]:
        """Phases with the latest end date first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM phase ORDER BY end_date DESC NULLS LAST LIMIT %s",
            (limit,),
        )
        rows = await cur.fetchall()
        return [_row_to_phase(r) for r in rows]

    async def create(self, phase: Phase) -> Phase:
        """Create phase."""
        await self._conn.execute(
            f"INSERT INTO phase ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                phase.id,
                phase.project_id,
                phase.name,
                phase.status.value,
                phase.start_date,
                phase.end_date,
            ),
        )
        return phase

    async def update(self, phase: Phase) -> None:
        """Update phase."""
        await self._conn.execute(
            "UPDATE phase SET project_id=%s, name=%s, status=%s, start_date=%s, end_date=%s "
            "WHERE id=%s",
            (
                phase.project_id,
                phase.name,
                phase.status.value,
                phase.start_date,
                phase.end_date,
                phase.id,
            ),
        )

    async def delete(self, phase_id: UUID) -> None:
        """Delete phase."""
        await self._conn.execute(
            "DELETE FROM phase WHERE id = %s",
            (phase_id,),
        )
