"""User API resources."""

from uuid import UUID

import falcon.asgi

from buildtrack.application.dto.user_dto import UserCreateInput, UserOutput
from buildtrack.application.use_cases.user.create_user import CreateUserUseCase
from buildtrack.application.use_cases.user.deactivate_user import DeactivateUserUseCase
from buildtrack.application.use_cases.user.list_users import ListUsersUseCase
from buildtrack.application.use_cases.user.resolve_user_permissions import (
    ResolveUserPermissionsUseCase,
)
from buildtrack.application.use_cases.user.update_user import UpdateUserUseCase
from buildtrack.domain.exceptions import NotFound, PermissionDenied, ValidationError
from buildtrack.interfaces.api.resources.parsing import parse_text, parse_uuid


def _user_to_dict(u: UserOutput) -> dict:
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "role_id": str(u.role_id) if u.role_id else None,
        "role_name": u.role_name,
        "project_id": str(u.project_id) if u.project_id else None,
        "assigned_project": u.project_name,
        "active": u.active,
        "created_at": u.created_at.isoformat(),
    }


class UsersResource:
    """GET/POST /v1/users - list and create users."""

    def __init__(
        self,
        list_users: ListUsersUseCase,
        create_user: CreateUserUseCase,
    ) -> None:
        self._list = list_users
        self._create = create_user

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List active users, ``?role=<name>`` filters by role."""
        role_name = req.get_param("role")
        if role_name == "All":
            role_name = None
        users = await self._list.execute(role_name=role_name)
        resp.media = {"items": [_user_to_dict(u) for u in users]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            data = UserCreateInput(
                name=parse_text(body.get("name"), "name"),
                email=parse_text(body.get("email"), "email"),
                role_id=parse_uuid(body.get("role_id")),
                project_id=parse_uuid(body.get("project_id")),
            )
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            created = await self._create.execute(user.user_id, data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "id": str(created.id),
            "name": created.name,
            "email": created.email,
            "role_id": str(created.role_id),
            "project_id": str(created.project_id) if created.project_id else None,
            "active": created.active,
            "created_at": created.created_at.isoformat(),
        }
        resp.status = falcon.HTTP_201


class UserResource:
    """PATCH/DELETE /v1/users/{user_id} - rename and deactivate."""

    def __init__(
        self,
        update_user: UpdateUserUseCase,
        deactivate_user: DeactivateUserUseCase,
    ) -> None:
        self._update = update_user
        self._deactivate = deactivate_user

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Rename user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            uid = UUID(user_id)
            body = await req.get_media()
            name = parse_text(body.get("name"), "name")
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e) or "Invalid request"}
            return

        try:
            updated = await self._update.execute(user.user_id, uid, name)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"id": str(updated.id), "name": updated.name}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Deactivate user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            uid = UUID(user_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid user ID"}
            return

        try:
            await self._deactivate.execute(user.user_id, uid)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class UserPermissionsResource:
    """GET /v1/users/{user_id}/permissions - effective permissions through the role."""

    def __init__(self, resolve_user_permissions: ResolveUserPermissionsUseCase) -> None:
        self._resolve = resolve_user_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        try:
            uid = UUID(user_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid user ID"}
            return

        try:
            names = await self._resolve.execute(uid)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": sorted(names)}
        resp.status = falcon.HTTP_200
