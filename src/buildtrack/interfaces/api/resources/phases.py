"""Phase API resources."""

from uuid import UUID, uuid4

import falcon.asgi

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import Phase
from buildtrack.domain.value_objects import PermissionName, PhaseStatus
from buildtrack.interfaces.api.resources.parsing import parse_date, parse_uuid


def _phase_to_dict(p: Phase, project_name: str) -> dict:
    return {
        "id": str(p.id),
        "project_id": str(p.project_id),
        "project_name": project_name,
        "name": p.name,
        "status": p.status.value,
        "start_date": p.start_date.isoformat() if p.start_date else None,
        "end_date": p.end_date.isoformat() if p.end_date else None,
    }


def _phase_from_body(phase_id: UUID, body: dict) -> Phase:
    """Build phase from body. Raises ValueError on missing or malformed fields."""
    project_id = parse_uuid(body.get("project_id"))
    if project_id is None:
        raise ValueError("Please select a project")
    name = (body.get("name") or "").strip()
    if not name:
        raise ValueError("Please enter a phase name")
    return Phase(
        id=phase_id,
        project_id=project_id,
        name=name,
        status=PhaseStatus(body.get("status") or PhaseStatus.NOT_STARTED),
        start_date=parse_date(body.get("start_date")),
        end_date=parse_date(body.get("end_date")),
    )


class PhasesResource:
    """GET/POST /v1/phases - list and create phases."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List phases by start date; ``?project_id=`` narrows to one project."""
        try:
            project_id = parse_uuid(req.get_param("project_id"))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid project ID"}
            return

        items = []
        async with self._uow_factory() as uow:
            names: dict = {}
            for p in await uow.phases.list(project_id=project_id):
                if p.project_id not in names:
                    project = await uow.projects.get_by_id(p.project_id)
                    names[p.project_id] = project.name if project else ""
                items.append(_phase_to_dict(p, names[p.project_id]))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.UPDATE_PROGRESS):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            body = await req.get_media()
            phase = _phase_from_body(uuid4(), body)
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(phase.project_id)
            if not project:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Project not found"}
                return
            await uow.phases.create(phase)

        resp.media = _phase_to_dict(phase, project.name)
        resp.status = falcon.HTTP_201


class PhaseResource:
    """PUT/DELETE /v1/phases/{phase_id}."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, phase_id: str
    ) -> None:
        """Replace phase fields."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.UPDATE_PROGRESS):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            body = await req.get_media()
            phase = _phase_from_body(UUID(phase_id), body)
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        async with self._uow_factory() as uow:
            if not await uow.phases.get_by_id(phase.id):
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Phase not found"}
                return
            project = await uow.projects.get_by_id(phase.project_id)
            if not project:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Project not found"}
                return
            await uow.phases.update(phase)

        resp.media = _phase_to_dict(phase, project.name)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, phase_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            pid = UUID(phase_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid phase ID"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.UPDATE_PROGRESS):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        async with self._uow_factory() as uow:
            await uow.phases.delete(pid)
        resp.status = falcon.HTTP_204
