"""Current session user."""

from uuid import UUID

import falcon.asgi

from buildtrack.application.use_cases.user.resolve_role_name import ResolveRoleNameUseCase
from buildtrack.application.use_cases.user.resolve_user_permissions import (
    ResolveUserPermissionsUseCase,
)
from buildtrack.application.use_cases.user.update_profile import UpdateProfileUseCase
from buildtrack.domain.entities import User
from buildtrack.domain.exceptions import NotFound, ValidationError
from buildtrack.interfaces.api.resources.parsing import parse_text


class MeResource:
    """GET/PATCH /v1/me - profile, role name and permissions of the caller."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolve_role_name: ResolveRoleNameUseCase,
        resolve_user_permissions: ResolveUserPermissionsUseCase,
        update_profile: UpdateProfileUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_name = resolve_role_name
        self._permissions = resolve_user_permissions
        self._update = update_profile

    async def _profile_to_dict(self, profile: User) -> dict:
        role_name = None
        if profile.role_id is not None:
            try:
                role_name = await self._role_name.execute(profile.role_id)
            except NotFound:
                role_name = None
        permissions = await self._permissions.execute(profile.id)
        return {
            "id": str(profile.id),
            "name": profile.name,
            "email": profile.email,
            "phone": profile.phone,
            "role_id": str(profile.role_id) if profile.role_id else None,
            "role_name": role_name,
            "permissions": sorted(permissions),
            "active": profile.active,
        }

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            uid = UUID(user.user_id)
        except ValueError:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No profile for current user"}
            return

        async with self._uow_factory() as uow:
            profile = await uow.users.get_by_id(uid)
        if not profile:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No profile for current user"}
            return

        resp.media = await self._profile_to_dict(profile)
        resp.status = falcon.HTTP_200

    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Update own name and phone."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            uid = UUID(user.user_id)
        except ValueError:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No profile for current user"}
            return

        try:
            body = await req.get_media()
            if not isinstance(body, dict):
                raise TypeError("Expected a JSON object")
            name = parse_text(body["name"], "name") if "name" in body else None
            phone = parse_text(body["phone"], "phone") if "phone" in body else None
        except (AttributeError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e) or "Expected a JSON object"}
            return

        try:
            profile = await self._update.execute(uid, name=name, phone=phone)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "No profile for current user"}
            return

        resp.media = await self._profile_to_dict(profile)
        resp.status = falcon.HTTP_200
