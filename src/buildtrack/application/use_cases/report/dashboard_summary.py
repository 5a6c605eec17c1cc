"""Dashboard summary use case."""

from decimal import Decimal

from buildtrack.application.dto.report_dto import DashboardSummary, RecentActivity

RECENT_PHASES = 3
RECENT_EXPENSES = 2


class DashboardSummaryUseCase:
    """Count projects and team members, total expenses and material stock.

    The activity feed lists the phases with the latest end dates, then the
    latest expenses.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> DashboardSummary:
        async with self._uow_factory() as uow:
            projects = await uow.projects.list()
            totals = await uow.expenses.totals_by_category()
            stock = await uow.materials.total_quantity()
            users = await uow.users.list_active()
            phases = await uow.phases.list_recent(RECENT_PHASES)
            expenses = await uow.expenses.list_recent(RECENT_EXPENSES)

        activity = [
            RecentActivity(
                kind="phase",
                message=f'Phase "{p.name}" status: {p.status.value}',
                date=p.end_date,
            )
            for p in phases
        ]
        activity += [
            RecentActivity(
                kind="expense",
                message=f"Expense of ${e.amount} recorded",
                date=e.date,
            )
            for e in expenses
        ]

        return DashboardSummary(
            active_projects=len(projects),
            total_expenses=sum(totals.values(), Decimal("0")),
            materials_stock=stock,
            team_members=len(users),
            recent_activity=activity,
        )
