"""Document metadata API resources.

File bytes live in object storage; these endpoints only record and list the
metadata rows pointing at them.
"""

from datetime import UTC, datetime
from uuid import uuid4

import falcon.asgi

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import Document
from buildtrack.domain.value_objects import DocumentCategory, PermissionName
from buildtrack.interfaces.api.resources.parsing import parse_text, parse_uuid


def _document_to_dict(d: Document, project_name: str) -> dict:
    return {
        "id": str(d.id),
        "name": d.name,
        "category": d.category.value,
        "project_id": str(d.project_id),
        "project_name": project_name,
        "uploaded_by": d.uploaded_by,
        "file_path": d.file_path,
        "type": d.type,
        "size": d.size,
        "status": d.status,
        "upload_date": d.upload_date.isoformat(),
    }


def _extension(filename: str) -> str | None:
    _, dot, ext = filename.rpartition(".")
    if not dot:
        return None
    return ext or None


class DocumentsResource:
    """GET/POST /v1/documents - list and register documents."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List documents, latest upload first; ``?q=`` searches by name."""
        search = (req.get_param("q") or "").strip() or None
        items = []
        async with self._uow_factory() as uow:
            projects: dict = {}
            for d in await uow.documents.list(search=search):
                if d.project_id not in projects:
                    project = await uow.projects.get_by_id(d.project_id)
                    projects[d.project_id] = project.name if project else ""
                items.append(_document_to_dict(d, projects[d.project_id]))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register an uploaded file. New documents start as pending."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(
            user.user_id, PermissionName.UPLOAD_SITE_UPDATES
        ):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            body = await req.get_media()
            name = parse_text(body.get("name"), "name").strip()
            file_path = parse_text(body.get("file_path"), "file_path").strip()
            if not name or not file_path:
                raise ValueError("name and file_path are required")
            category = parse_text(body.get("category"), "category")
            project_id = parse_uuid(body.get("project_id"))
            if not category or project_id is None:
                raise ValueError("Please select both a category and project")
            document = Document(
                id=uuid4(),
                name=name,
                category=DocumentCategory(category),
                project_id=project_id,
                uploaded_by=user.user_id,
                file_path=file_path,
                type=parse_text(body.get("type"), "type") or _extension(name),
                size=parse_text(body.get("size"), "size") or None,
                upload_date=datetime.now(UTC),
            )
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        async with self._uow_factory() as uow:
            project = await uow.projects.get_by_id(document.project_id)
            if not project:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Project not found"}
                return
            await uow.documents.create(document)

        resp.media = _document_to_dict(document, project.name)
        resp.status = falcon.HTTP_201
