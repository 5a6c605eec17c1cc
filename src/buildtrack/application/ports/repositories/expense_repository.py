"""Expense repository port."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from buildtrack.domain.entities import Expense


class ExpenseRepository(Protocol):
    """Port for expense persistence and aggregates."""

    async def list(self) -> list[Expense]: ...

    async def list_recent(self, limit: int) -> list[Expense]: ...

    async def create(self, expense: Expense) -> Expense: ...

    async def totals_by_category(self) -> dict[str, Decimal]: ...
