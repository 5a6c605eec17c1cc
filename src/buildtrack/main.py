"""Application entry point and composition root."""

import logging

from buildtrack import __version__
from buildtrack.application.use_cases.permission.assign_permission import (
    AssignPermissionUseCase,
)
from buildtrack.application.use_cases.permission.effective_permissions import (
    EffectivePermissionsUseCase,
)
from buildtrack.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from buildtrack.application.use_cases.permission.remove_permission import (
    RemovePermissionUseCase,
)
from buildtrack.application.use_cases.report.dashboard_summary import (
    DashboardSummaryUseCase,
)
from buildtrack.application.use_cases.report.expense_report import ExpenseReportUseCase
from buildtrack.application.use_cases.role.create_role import CreateRoleUseCase
from buildtrack.application.use_cases.role.deactivate_role import DeactivateRoleUseCase
from buildtrack.application.use_cases.role.list_active_roles import ListActiveRolesUseCase
from buildtrack.application.use_cases.role.update_role import UpdateRoleUseCase
from buildtrack.application.use_cases.user.create_user import CreateUserUseCase
from buildtrack.application.use_cases.user.deactivate_user import DeactivateUserUseCase
from buildtrack.application.use_cases.user.list_users import ListUsersUseCase
from buildtrack.application.use_cases.user.resolve_role_name import ResolveRoleNameUseCase
from buildtrack.application.use_cases.user.resolve_user_permissions import (
    ResolveUserPermissionsUseCase,
)
from buildtrack.application.use_cases.user.update_profile import UpdateProfileUseCase
from buildtrack.application.use_cases.user.update_user import UpdateUserUseCase
from buildtrack.config import get_settings
from buildtrack.infrastructure.auth.keycloak_provider import KeycloakProvider
from buildtrack.infrastructure.permission.permission_checker import (
    RoleBasedPermissionChecker,
)
from buildtrack.infrastructure.persistence.postgres.connection import create_pool
from buildtrack.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from buildtrack.interfaces.api.app import ApiResources, create_app
from buildtrack.interfaces.api.middleware.auth import AuthMiddleware
from buildtrack.interfaces.api.middleware.cors import CORSMiddleware
from buildtrack.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from buildtrack.interfaces.api.resources.documents import DocumentsResource
from buildtrack.interfaces.api.resources.expenses import ExpensesResource
from buildtrack.interfaces.api.resources.health import HealthResource
from buildtrack.interfaces.api.resources.materials import MaterialsResource
from buildtrack.interfaces.api.resources.me import MeResource
from buildtrack.interfaces.api.resources.permissions import PermissionsResource
from buildtrack.interfaces.api.resources.phases import PhaseResource, PhasesResource
from buildtrack.interfaces.api.resources.projects import ProjectResource, ProjectsResource
from buildtrack.interfaces.api.resources.reports import (
    DashboardResource,
    ExpenseReportResource,
)
from buildtrack.interfaces.api.resources.roles import (
    RolePermissionResource,
    RolePermissionsResource,
    RoleResource,
    RolesResource,
)
from buildtrack.interfaces.api.resources.users import (
    UserPermissionsResource,
    UserResource,
    UsersResource,
)
from buildtrack.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_resources(uow_factory, permission_checker) -> ApiResources:
    """Wire use cases and resources around a UoW factory and permission checker."""
    assign_permission = AssignPermissionUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    remove_permission = RemovePermissionUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    effective_permissions = EffectivePermissionsUseCase(unit_of_work_factory=uow_factory)
    list_permissions = ListPermissionsUseCase(unit_of_work_factory=uow_factory)
    list_active_roles = ListActiveRolesUseCase(unit_of_work_factory=uow_factory)
    create_role = CreateRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_role = UpdateRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    deactivate_role = DeactivateRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_users = ListUsersUseCase(unit_of_work_factory=uow_factory)
    create_user = CreateUserUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_user = UpdateUserUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    deactivate_user = DeactivateUserUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    resolve_role_name = ResolveRoleNameUseCase(unit_of_work_factory=uow_factory)
    resolve_user_permissions = ResolveUserPermissionsUseCase(unit_of_work_factory=uow_factory)
    update_profile = UpdateProfileUseCase(unit_of_work_factory=uow_factory)
    expense_report = ExpenseReportUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    dashboard_summary = DashboardSummaryUseCase(unit_of_work_factory=uow_factory)

    return ApiResources(
        health=HealthResource(uow_factory),
        me=MeResource(
            uow_factory, resolve_role_name, resolve_user_permissions, update_profile
        ),
        roles=RolesResource(uow_factory, list_active_roles, create_role),
        role=RoleResource(uow_factory, update_role, deactivate_role),
        role_permissions=RolePermissionsResource(effective_permissions, assign_permission),
        role_permission=RolePermissionResource(remove_permission),
        permissions=PermissionsResource(list_permissions),
        users=UsersResource(list_users, create_user),
        user=UserResource(update_user, deactivate_user),
        user_permissions=UserPermissionsResource(resolve_user_permissions),
        projects=ProjectsResource(uow_factory, permission_checker),
        project=ProjectResource(uow_factory, permission_checker),
        phases=PhasesResource(uow_factory, permission_checker),
        phase=PhaseResource(uow_factory, permission_checker),
        expenses=ExpensesResource(uow_factory, permission_checker),
        materials=MaterialsResource(uow_factory, permission_checker),
        documents=DocumentsResource(uow_factory, permission_checker),
        expense_report=ExpenseReportResource(expense_report),
        dashboard=DashboardResource(dashboard_summary),
    )


def create_buildtrack_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET is not set; bearer tokens will be rejected")

    permission_checker = RoleBasedPermissionChecker(
        uow_factory, enforce=settings.enforce_permissions
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        build_resources(uow_factory, permission_checker),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("BuildTrack v%s (%s)", __version__, settings.environment)
    uvicorn.run(
        "buildtrack.main:create_buildtrack_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
