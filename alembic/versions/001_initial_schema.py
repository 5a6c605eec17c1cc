"""Initial schema - roles, permissions, profiles, project data and documents.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ADMIN_ROLE_ID = "00000000-0000-4000-8000-000000000001"

PERMISSIONS = [
    "Add Project",
    "Edit Project",
    "Delete Project",
    "View Project Status",
    "Update Progress",
    "Upload Site Updates",
    "View Expenses",
    "Manage Expenses",
    "Manage Materials",
    "View Reports",
    "Generate Reports",
    "Manage Users",
    "Manage Roles",
]


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_role_name", "role", ["name"], unique=True)
    op.create_index("ix_role_active_created", "role", ["is_active", "created_at"])

    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_index("ix_permission_name", "permission", ["name"], unique=True)

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "permission_id",
            sa.UUID(),
            sa.ForeignKey("permission.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "project",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("manager_id", sa.UUID(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "profile",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id"), nullable=True),
        sa.Column("project_id", sa.UUID(), sa.ForeignKey("project.id", ondelete="SET NULL"), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_profile_email", "profile", ["email"], unique=True)
    op.create_index("ix_profile_role_id", "profile", ["role_id"])
    op.create_foreign_key(
        "fk_project_manager", "project", "profile", ["manager_id"], ["id"], ondelete="SET NULL"
    )

    op.create_table(
        "phase",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("project_id", sa.UUID(), sa.ForeignKey("project.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="Not Started"),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
    )

    op.create_table(
        "expense",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("phase_id", sa.UUID(), sa.ForeignKey("phase.id", ondelete="CASCADE"), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("proof_url", sa.Text(), nullable=True),
    )
    op.create_index("ix_expense_date", "expense", ["date"])

    op.create_table(
        "material",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("qty_required", sa.Integer(), nullable=False),
        sa.Column("unit_cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("vendor", sa.String(255), nullable=False),
    )

    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("project_id", sa.UUID(), sa.ForeignKey("project.id", ondelete="CASCADE"), nullable=False),
        sa.Column("uploaded_by", sa.String(255), nullable=False),
        sa.Column("file_path", sa.Text(), nullable=False),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("size", sa.String(50), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("upload_date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_document_upload_date", "document", ["upload_date"])

    permission_table = sa.table("permission", sa.column("name", sa.String))
    op.bulk_insert(permission_table, [{"name": name} for name in PERMISSIONS])

    # Bootstrap role holding the whole catalog; link the first profile to it by hand.
    op.execute(
        "INSERT INTO role (id, name, is_active, created_at) "
        f"VALUES ('{ADMIN_ROLE_ID}', 'Admin', true, now())"
    )
    op.execute(
        "INSERT INTO role_permission (role_id, permission_id) "
        f"SELECT '{ADMIN_ROLE_ID}'::uuid, id FROM permission"
    )


def downgrade() -> None:
    op.drop_table("document")
    op.drop_table("material")
    op.drop_table("expense")
    op.drop_table("phase")
    op.drop_constraint("fk_project_manager", "project", type_="foreignkey")
    op.drop_table("profile")
    op.drop_table("project")
    op.drop_table("role_permission")
    op.drop_table("permission")
    op.drop_table("role")
