"""Expense API resources."""

from datetime import date
from uuid import uuid4

import falcon.asgi

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import Expense
from buildtrack.domain.value_objects import PermissionName
from buildtrack.interfaces.api.resources.parsing import parse_date, parse_decimal, parse_uuid

DEFAULT_CATEGORY = "Labour"


def _expense_to_dict(e: Expense, phase_name: str, project_name: str) -> dict:
    return {
        "id": str(e.id),
        "phase_id": str(e.phase_id),
        "phase_name": phase_name,
        "project_name": project_name,
        "category": e.category,
        "amount": str(e.amount),
        "date": e.date.isoformat(),
        "proof_url": e.proof_url,
    }


class ExpensesResource:
    """GET/POST /v1/expenses - list and record expenses."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List expenses, latest first, with phase and project names."""
        items = []
        async with self._uow_factory() as uow:
            phases: dict = {}
            for e in await uow.expenses.list():
                if e.phase_id not in phases:
                    phase = await uow.phases.get_by_id(e.phase_id)
                    project = await uow.projects.get_by_id(phase.project_id) if phase else None
                    phases[e.phase_id] = (
                        phase.name if phase else "",
                        project.name if project else "",
                    )
                items.append(_expense_to_dict(e, *phases[e.phase_id]))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Record expense against a phase. Date defaults to today."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.MANAGE_EXPENSES):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            body = await req.get_media()
            phase_id = parse_uuid(body.get("phase_id"))
            if phase_id is None:
                raise ValueError("phase_id is required")
            expense = Expense(
                id=uuid4(),
                phase_id=phase_id,
                category=(body.get("category") or DEFAULT_CATEGORY).strip(),
                amount=parse_decimal(body.get("amount"), "amount"),
                date=parse_date(body.get("date")) or date.today(),
                proof_url=body.get("proof_url") or None,
            )
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        async with self._uow_factory() as uow:
            phase = await uow.phases.get_by_id(expense.phase_id)
            if not phase:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Phase not found"}
                return
            project = await uow.projects.get_by_id(phase.project_id)
            await uow.expenses.create(expense)

        resp.media = _expense_to_dict(expense, phase.name, project.name if project else "")
        resp.status = falcon.HTTP_201
