"""Repository ports."""

from buildtrack.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from buildtrack.application.ports.repositories.expense_repository import (
    ExpenseRepository,
)
from buildtrack.application.ports.repositories.material_repository import (
    MaterialRepository,
)
from buildtrack.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from buildtrack.application.ports.repositories.phase_repository import PhaseRepository
from buildtrack.application.ports.repositories.project_repository import (
    ProjectRepository,
)
from buildtrack.application.ports.repositories.role_permission_repository import (
    RolePermissionRepository,
)
from buildtrack.application.ports.repositories.role_repository import RoleRepository
from buildtrack.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "DocumentRepository",
    "ExpenseRepository",
    "MaterialRepository",
    "PermissionRepository",
    "PhaseRepository",
    "ProjectRepository",
    "RolePermissionRepository",
    "RoleRepository",
    "UserRepository",
]
