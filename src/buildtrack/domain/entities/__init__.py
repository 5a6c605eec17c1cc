"""Domain entities."""

from buildtrack.domain.entities.document import Document
from buildtrack.domain.entities.expense import Expense
from buildtrack.domain.entities.material import Material
from buildtrack.domain.entities.permission import Permission
from buildtrack.domain.entities.phase import Phase
from buildtrack.domain.entities.project import Project
from buildtrack.domain.entities.role import Role
from buildtrack.domain.entities.role_permission import RolePermission
from buildtrack.domain.entities.user import User

__all__ = [
    "Document",
    "Expense",
    "Material",
    "Permission",
    "Phase",
    "Project",
    "Role",
    "RolePermission",
    "User",
]
