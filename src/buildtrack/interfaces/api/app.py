"""Falcon ASGI application."""

import logging
from dataclasses import dataclass

import falcon
import falcon.asgi
from falcon.asgi import App

from buildtrack.domain.exceptions import GatewayError
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

logger = logging.getLogger(__name__)


@dataclass
class ApiResources:
    """All resources the API routes to."""

    health: HealthResource
    me: MeResource
    roles: RolesResource
    role: RoleResource
    role_permissions: RolePermissionsResource
    role_permission: RolePermissionResource
    permissions: PermissionsResource
    users: UsersResource
    user: UserResource
    user_permissions: UserPermissionsResource
    projects: ProjectsResource
    project: ProjectResource
    phases: PhasesResource
    phase: PhaseResource
    expenses: ExpensesResource
    materials: MaterialsResource
    documents: DocumentsResource
    expense_report: ExpenseReportResource
    dashboard: DashboardResource


async def handle_gateway_error(req, resp, ex, params):
    """Data store failures surface with the raw driver message."""
    logger.error("Gateway error on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_502
    resp.media = {"error": str(ex)}


async def handle_unexpected(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(resources: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(GatewayError, handle_gateway_error)

    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/me", resources.me)
    app.add_route("/v1/roles", resources.roles)
    app.add_route("/v1/roles/{role_id}", resources.role)
    app.add_route("/v1/roles/{role_id}/permissions", resources.role_permissions)
    app.add_route(
        "/v1/roles/{role_id}/permissions/{permission_name}",
        resources.role_permission,
    )
    app.add_route("/v1/permissions", resources.permissions)
    app.add_route("/v1/users", resources.users)
    app.add_route("/v1/users/{user_id}", resources.user)
    app.add_route("/v1/users/{user_id}/permissions", resources.user_permissions)
    app.add_route("/v1/projects", resources.projects)
    app.add_route("/v1/projects/{project_id}", resources.project)
    app.add_route("/v1/phases", resources.phases)
    app.add_route("/v1/phases/{phase_id}", resources.phase)
    app.add_route("/v1/expenses", resources.expenses)
    app.add_route("/v1/materials", resources.materials)
    app.add_route("/v1/documents", resources.documents)
    app.add_route("/v1/reports/expenses", resources.expense_report)
    app.add_route("/v1/dashboard", resources.dashboard)
    return app
