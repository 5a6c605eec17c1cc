"""List users use case."""

from buildtrack.application.dto.user_dto import UserOutput


class ListUsersUseCase:
    """Active users, newest first, with role and project names resolved."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_name: str | None = None) -> list[UserOutput]:
        """List users; ``role_name`` keeps only holders of that role."""
        role_names: dict = {}
        project_names: dict = {}
        items = []
        async with self._uow_factory() as uow:
            for user in await uow.users.list_active():
                if user.role_id is not None and user.role_id not in role_names:
                    role = await uow.roles.get_by_id(user.role_id)
                    role_names[user.role_id] = role.name if role else "N/A"
                if user.project_id is not None and user.project_id not in project_names:
                    project = await uow.projects.get_by_id(user.project_id)
                    project_names[user.project_id] = project.name if project else "None"
                items.append(
                    UserOutput(
                        id=user.id,
                        name=user.name,
                        email=user.email,
                        role_id=user.role_id,
                        role_name=role_names.get(user.role_id, "N/A"),
                        project_id=user.project_id,
                        project_name=project_names.get(user.project_id, "None"),
                        active=user.active,
                        created_at=user.created_at,
                    )
                )

        if role_name:
            items = [u for u in items if u.role_name == role_name]
        return items
