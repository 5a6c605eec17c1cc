"""List active roles use case."""

from buildtrack.domain.entities import Role
from buildtrack.domain.value_objects import RoleOrder


class ListActiveRolesUseCase:
    """Return roles that have not been deactivated."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, order_by: RoleOrder = RoleOrder.NEWEST) -> list[Role]:
        """Newest first by default, alphabetical with RoleOrder.NAME."""
        async with self._uow_factory() as uow:
            return await uow.roles.list_active(order_by)
