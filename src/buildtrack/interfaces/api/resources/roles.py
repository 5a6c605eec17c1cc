"""Role and role-permission API resources."""

from uuid import UUID

import falcon.asgi

from buildtrack.application.use_cases.permission.assign_permission import (
    AssignPermissionUseCase,
)
from buildtrack.application.use_cases.permission.effective_permissions import (
    EffectivePermissionsUseCase,
)
from buildtrack.application.use_cases.permission.remove_permission import (
    RemovePermissionUseCase,
)
from buildtrack.application.use_cases.role.create_role import CreateRoleUseCase
from buildtrack.application.use_cases.role.deactivate_role import DeactivateRoleUseCase
from buildtrack.application.use_cases.role.list_active_roles import ListActiveRolesUseCase
from buildtrack.application.use_cases.role.update_role import UpdateRoleUseCase
from buildtrack.domain.entities import Role
from buildtrack.domain.exceptions import NotFound, PermissionDenied, ValidationError
from buildtrack.domain.value_objects import RoleOrder
from buildtrack.interfaces.api.resources.parsing import parse_text


def _role_to_dict(role: Role, permissions: set[str]) -> dict:
    return {
        "id": str(role.id),
        "name": role.name,
        "is_active": role.is_active,
        "permissions": sorted(permissions),
        "created_at": role.created_at.isoformat(),
    }


class RolesResource:
    """GET/POST /v1/roles - list active roles and create roles."""

    def __init__(
        self,
        unit_of_work_factory: type,
        list_active_roles: ListActiveRolesUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._list = list_active_roles
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List active roles with their permissions."""
        try:
            order_by = RoleOrder(req.get_param("order") or RoleOrder.NEWEST)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "order must be one of: created_at, name"}
            return

        roles = await self._list.execute(order_by)
        items = []
        async with self._uow_factory() as uow:
            for role in roles:
                names = await uow.role_permissions.list_permission_names(role.id)
                items.append(_role_to_dict(role, names))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create role, optionally with initial permissions."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Expected a JSON object"}
            return
        permissions = body.get("permissions") or []
        if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permissions must be a list of names"}
            return
        try:
            name = parse_text(body.get("name"), "name")
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            role = await self._create.execute(user.user_id, name, permissions)
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

        resp.media = _role_to_dict(role, set(permissions))
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PATCH/DELETE /v1/roles/{role_id}."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_role: UpdateRoleUseCase,
        deactivate_role: DeactivateRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update = update_role
        self._deactivate = deactivate_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Get role, including inactive ones."""
        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(rid)
            if not role:
                resp.status = falcon.HTTP_404
                resp.media = {"error": "Role not found"}
                return
            names = await uow.role_permissions.list_permission_names(rid)

        resp.media = _role_to_dict(role, names)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Rename role; a ``permissions`` list replaces its grants pair by pair."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Expected a JSON object"}
            return
        permissions = body.get("permissions")
        if permissions is not None and (
            not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions)
        ):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permissions must be a list of names"}
            return
        try:
            name = parse_text(body.get("name"), "name")
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            role = await self._update.execute(user.user_id, rid, name, permissions)
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

        async with self._uow_factory() as uow:
            names = await uow.role_permissions.list_permission_names(role.id)
        resp.media = _role_to_dict(role, names)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Deactivate role. ``?reassign_to=<role id>`` moves its users, else they lose the role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            rid = UUID(role_id)
            reassign_param = req.get_param("reassign_to")
            reassign_to = UUID(reassign_param) if reassign_param else None
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        try:
            await self._deactivate.execute(user.user_id, rid, reassign_to)
            resp.status = falcon.HTTP_204
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class RolePermissionsResource:
    """GET/POST /v1/roles/{role_id}/permissions - effective set and assignment."""

    def __init__(
        self,
        effective_permissions: EffectivePermissionsUseCase,
        assign_permission: AssignPermissionUseCase,
    ) -> None:
        self._effective = effective_permissions
        self._assign = assign_permission

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Effective permissions of role."""
        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        try:
            names = await self._effective.execute(rid)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": sorted(names)}
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Assign permission to role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        try:
            body = await req.get_media()
            permission = body["permission"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        if not isinstance(permission, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permission must be a name"}
            return

        try:
            await self._assign.execute(user.user_id, rid, permission)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class RolePermissionResource:
    """DELETE /v1/roles/{role_id}/permissions/{permission_name} - remove permission."""

    def __init__(self, remove_permission: RemovePermissionUseCase) -> None:
        self._remove = remove_permission

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
        permission_name: str,
    ) -> None:
        """Remove permission from role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            rid = UUID(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        try:
            await self._remove.execute(user.user_id, rid, permission_name)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
