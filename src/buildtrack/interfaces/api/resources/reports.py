"""Report API resources."""

import falcon.asgi

from buildtrack.application.use_cases.report.dashboard_summary import (
    DashboardSummaryUseCase,
)
from buildtrack.application.use_cases.report.expense_report import ExpenseReportUseCase
from buildtrack.domain.exceptions import PermissionDenied


class ExpenseReportResource:
    """GET /v1/reports/expenses - totals per expense category."""

    def __init__(self, expense_report: ExpenseReportUseCase) -> None:
        self._report = expense_report

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            totals = await self._report.execute(user.user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "items": [{"category": t.category, "total": str(t.total)} for t in totals]
        }
        resp.status = falcon.HTTP_200


class DashboardResource:
    """GET /v1/dashboard - headline figures."""

    def __init__(self, dashboard_summary: DashboardSummaryUseCase) -> None:
        self._summary = dashboard_summary

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        summary = await self._summary.execute()
        resp.media = {
            "active_projects": summary.active_projects,
            "total_expenses": str(summary.total_expenses),
            "materials_stock": summary.materials_stock,
            "team_members": summary.team_members,
            "recent_activity": [
                {
                    "kind": a.kind,
                    "message": a.message,
                    "date": a.date.isoformat() if a.date else None,
                }
                for a in summary.recent_activity
            ],
        }
        resp.status = falcon.HTTP_200
