"""Report DTOs."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass
class CategoryTotal:
    """Sum of expenses in one category."""

    category: str
    total: Decimal


@dataclass
class RecentActivity:
    """One line of the dashboard activity feed."""

    kind: str  # "phase" or "expense"
    message: str
    date: date | None


@dataclass
class DashboardSummary:
    """Headline figures for the dashboard."""

    active_projects: int
    total_expenses: Decimal
    materials_stock: int
    team_members: int
    recent_activity: list[RecentActivity] = field(default_factory=list)
