"""Expense report use case."""

from buildtrack.application.dto.report_dto import CategoryTotal
from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.exceptions import PermissionDenied
from buildtrack.domain.value_objects import PermissionName


class ExpenseReportUseCase:
    """Expense totals grouped by category."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str) -> list[CategoryTotal]:
        allowed = await self._permission_checker.check(actor_id, PermissionName.VIEW_REPORTS)
        if not allowed:
            raise PermissionDenied("User is not allowed to view reports")

        async with self._uow_factory() as uow:
            totals = await uow.expenses.totals_by_category()

        return [CategoryTotal(category=c, total=totals[c]) for c in sorted(totals)]
