"""Project API resources."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import falcon.asgi

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import Project
from buildtrack.domain.value_objects import PermissionName, ProjectType
from buildtrack.interfaces.api.resources.parsing import parse_date, parse_uuid


def _project_to_dict(p: Project, manager_name: str | None) -> dict:
    return {
        "id": str(p.id),
        "name": p.name,
        "type": p.type.value,
        "location": p.location,
        "manager_id": str(p.manager_id) if p.manager_id else None,
        "manager_name": manager_name,
        "start_date": p.start_date.isoformat() if p.start_date else None,
        "end_date": p.end_date.isoformat() if p.end_date else None,
        "created_at": p.created_at.isoformat(),
    }


def _apply_body(project: Project, body: dict) -> None:
    """Copy editable fields from a request body onto project."""
    if "name" in body:
        project.name = (body.get("name") or "").strip()
    if "type" in body:
        project.type = ProjectType(body.get("type") or ProjectType.RESIDENTIAL)
    if "location" in body:
        project.location = body.get("location") or None
    if "manager_id" in body:
        project.manager_id = parse_uuid(body.get("manager_id"))
    if "start_date" in body:
        project.start_date = parse_date(body.get("start_date"))
    if "end_date" in body:
        project.end_date = parse_date(body.get("end_date"))


class ProjectsResource:
    """GET/POST /v1/projects - list and create projects."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List projects, newest first; ``?q=`` searches name and location."""
        search = (req.get_param("q") or "").strip() or None
        items = []
        async with self._uow_factory() as uow:
            managers: dict = {}
            for p in await uow.projects.list(search=search):
                if p.manager_id and p.manager_id not in managers:
                    manager = await uow.users.get_by_id(p.manager_id)
                    managers[p.manager_id] = manager.name if manager else None
                items.append(_project_to_dict(p, managers.get(p.manager_id)))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create project. Name is required, type defaults to Residential."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.ADD_PROJECT):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        project = Project(
            id=uuid4(),
            name="",
            type=ProjectType.RESIDENTIAL,
            created_at=datetime.now(UTC),
        )
        try:
            body = await req.get_media()
            _apply_body(project, body)
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        if not project.name:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Project name is required"}
            return

        async with self._uow_factory() as uow:
            if project.manager_id and not await uow.users.get_by_id(project.manager_id):
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Manager not found"}
                return
            await uow.projects.create(project)

        resp.media = _project_to_dict(project, None)
        resp.status = falcon.HTTP_201


class ProjectResource:
    """GET/PATCH /v1/projects/{project_id}."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        try:
            pid = UUID(project_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid project ID"}
            return

        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(pid)
            if not project:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Project not found"}
                return
            manager = await uow.users.get_by_id(project.manager_id) if project.manager_id else None

        resp.media = _project_to_dict(project, manager.name if manager else None)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            pid = UUID(project_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid project ID"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.EDIT_PROJECT):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        body = await req.get_media()
        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(pid)
            if not project:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Project not found"}
                return
            try:
                _apply_body(project, body)
            except (AttributeError, ValueError) as e:
                resp.status = falcon.HTTP_400
                resp.media = {"error": str(e)}
                return
            if not project.name:
                resp.status = falcon.HTTP_400
                resp.media = {"error": "Project name is required"}
                return
            await uow.projects.update(project)

        resp.media = _project_to_dict(project, None)
        resp.status = falcon.HTTP_200
