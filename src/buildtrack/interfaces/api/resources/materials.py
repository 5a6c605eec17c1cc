"""Material API resources."""

from uuid import uuid4

import falcon.asgi

from buildtrack.application.ports import PermissionChecker
from buildtrack.domain.entities import Material
from buildtrack.domain.value_objects import PermissionName
from buildtrack.interfaces.api.resources.parsing import parse_decimal


def _material_to_dict(m: Material) -> dict:
    return {
        "id": str(m.id),
        "name": m.name,
        "qty_required": m.qty_required,
        "unit_cost": str(m.unit_cost),
        "vendor": m.vendor,
    }


class MaterialsResource:
    """GET/POST /v1/materials - list and add materials."""

    def __init__(self, unit_of_work_factory: type, permission_checker: PermissionChecker) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            materials = await uow.materials.list()
        resp.media = {"items": [_material_to_dict(m) for m in materials]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Add material. All fields are required."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._permission_checker.check(user.user_id, PermissionName.MANAGE_MATERIALS):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            body = await req.get_media()
            name = (body.get("name") or "").strip()
            vendor = (body.get("vendor") or "").strip()
            if not name or not vendor:
                raise ValueError("Please fill all fields")
            qty = parse_decimal(body.get("qty_required"), "qty_required")
            if qty != qty.to_integral_value() or qty < 0:
                raise ValueError("qty_required must be a non-negative whole number")
            material = Material(
                id=uuid4(),
                name=name,
                qty_required=int(qty),
                unit_cost=parse_decimal(body.get("unit_cost"), "unit_cost"),
                vendor=vendor,
            )
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        async with self._uow_factory() as uow:
            await uow.materials.create(material)

        resp.media = _material_to_dict(material)
        resp.status = falcon.HTTP_201
