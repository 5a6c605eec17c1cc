"""PostgreSQL material repository implementation."""

from __future__ import annotations

from psycopg import AsyncConnection

from buildtrack.domain.entities import Material


class PostgresMaterialRepository:
    """Material repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list(self) -> list[Material]:
        """List materials by name."""
        cur = await self._conn.execute(
            "SELECT id, name, qty_required, unit_cost, vendor FROM material ORDER BY name"
        )
        rows = await cur.fetchall()
        return [
            Material(id=r[0], name=r[1], qty_required=r[2], unit_cost=r[3], vendor=r[4])
            for r in rows
        ]

    async def create(self, material: Material) -> Material:
        """Create material."""
        await self._conn.execute(
            "INSERT INTO material (id, name, qty_required, unit_cost, vendor) "
            "VALUES (%s, %s, %s, %s, %s)",
            (
                material.id,
                material.name,
                material.qty_required,
                material.unit_cost,
                material.vendor,
            ),
        )
        return material

    async def total_quantity(self) -> int:
        """Sum of required quantities across materials."""
        cur = await self._conn.execute("SELECT COALESCE(SUM(qty_required), 0) FROM material")
        r = await cur.fetchone()
        return int(r[0])
