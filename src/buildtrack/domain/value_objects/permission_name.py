"""Permission names the API guards on.

The permission catalog itself lives in the ``permission`` table and may grow
without code changes; these are the seeded names that endpoints check.
"""

from enum import StrEnum


class PermissionName(StrEnum):
    """Seeded permission names."""

    ADD_PROJECT = "Add Project"
    EDIT_PROJECT = "Edit Project"
    DELETE_PROJECT = "Delete Project"
    VIEW_PROJECT_STATUS = "View Project Status"
    UPDATE_PROGRESS = "Update Progress"
    UPLOAD_SITE_UPDATES = "Upload Site Updates"
    VIEW_EXPENSES = "View Expenses"
    MANAGE_EXPENSES = "Manage Expenses"
    MANAGE_MATERIALS = "Manage Materials"
    VIEW_REPORTS = "View Reports"
    GENERATE_REPORTS = "Generate Reports"
    MANAGE_USERS = "Manage Users"
    MANAGE_ROLES = "Manage Roles"
