"""Domain value objects."""

from buildtrack.domain.value_objects.document_category import DocumentCategory
from buildtrack.domain.value_objects.permission_name import PermissionName
from buildtrack.domain.value_objects.phase_status import PhaseStatus
from buildtrack.domain.value_objects.project_type import ProjectType
from buildtrack.domain.value_objects.role_order import RoleOrder

__all__ = [
    "DocumentCategory",
    "PermissionName",
    "PhaseStatus",
    "ProjectType",
    "RoleOrder",
]
