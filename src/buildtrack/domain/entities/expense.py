"""Expense entity - money spent against a phase."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass
class Expense:
    """Expense booked on a phase."""

    id: UUID
    phase_id: UUID
    category: str
    amount: Decimal
    date: date
    proof_url: str | None = None
