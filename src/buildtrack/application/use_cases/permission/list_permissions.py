"""List permission catalog use case."""

from buildtrack.domain.entities import Permission


class ListPermissionsUseCase:
    """Return the full permission catalog ordered by name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[Permission]:
        async with self._uow_factory() as uow:
            return await uow.permissions.list_all()
