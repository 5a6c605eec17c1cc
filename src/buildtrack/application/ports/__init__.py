"""Application ports - interfaces for external adapters."""

from buildtrack.application.ports.permission_checker import PermissionChecker
from buildtrack.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
