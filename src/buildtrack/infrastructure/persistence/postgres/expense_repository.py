"""PostgreSQL expense repository implementation."""

from __future__ import annotations

from decimal import Decimal

from psycopg import AsyncConnection

from buildtrack.domain.entities import Expense

_COLUMNS = "id, phase_id, category, amount, date, proof_url"


def _row_to_expense(r: tuple) -> Expense:
    return Expense(
        id=r[0],
        phase_id=r[1],
        category=r[2],
        amount=r[3],
        date=r[4],
        proof_url=r[5],
    )


class PostgresExpenseRepository:
    """Expense repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list(self) -> list[Expense]:
        """List expenses, latest date first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM expense ORDER BY date DESC"
        )
        rows = await cur.fetchall()
        return [_row_to_expense(r) for r in rows]

    async def list_recent(self, limit: int) -> list[Expense]:
        """Latest ``limit`` expenses by date."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM expense ORDER BY date DESC LIMIT %s",
            (limit,),
        )
        rows = await cur.fetchall()
        return [_row_to_expense(r) for r in rows]

    async def create(self, expense: Expense) -> Expense:
        """Create expense."""
        await self._conn.execute(
            f"INSERT INTO expense ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                expense.id,
                expense.phase_id,
                expense.category,
                expense.amount,
                expense.date,
                expense.proof_url,
            ),
        )
        return expense

    async def totals_by_category(self) -> dict[str, Decimal]:
        """Sum of amounts per category."""
        cur = await self._conn.execute(
            "SELECT category, SUM(amount) FROM expense GROUP BY category"
        )
        rows = await cur.fetchall()
        return {r[0]: r[1] for r in rows}
