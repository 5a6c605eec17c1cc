"""Permission catalog API resource."""

import falcon.asgi

from buildtrack.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)


class PermissionsResource:
    """GET /v1/permissions - the permission catalog."""

    def __init__(self, list_permissions: ListPermissionsUseCase) -> None:
        self._list = list_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        permissions = await self._list.execute()
        resp.media = {"items": [{"id": str(p.id), "name": p.name} for p in permissions]}
        resp.status = falcon.HTTP_200
