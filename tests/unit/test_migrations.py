"""Tests for the initial Alembic migration's seed data."""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from buildtrack.domain.value_objects import PermissionName

MIGRATION = Path(__file__).resolve().parents[2] / "alembic" / "versions" / "001_initial_schema.py"


@pytest.fixture
def migration():
    spec = importlib.util.spec_from_file_location("initial_schema", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    module.op = MagicMock()
    return module


def test_catalog_matches_permission_names(migration) -> None:
    assert sorted(migration.PERMISSIONS) == sorted(p.value for p in PermissionName)


def test_upgrade_seeds_admin_role_with_every_permission(migration) -> None:
    migration.upgrade()

    statements = [c.args[0] for c in migration.op.execute.call_args_list]
    assert len(statements) == 2
    role_sql, grant_sql = statements
    assert role_sql.startswith("INSERT INTO role ")
    assert f"'{migration.ADMIN_ROLE_ID}', 'Admin', true" in role_sql
    assert grant_sql.startswith("INSERT INTO role_permission ")
    assert grant_sql.endswith("FROM permission")


def test_admin_seed_runs_after_catalog(migration) -> None:
    migration.upgrade()

    calls = [c[0] for c in migration.op.method_calls]
    assert calls.index("bulk_insert") < calls.index("execute")


def test_downgrade_drops_documents_first(migration) -> None:
    migration.downgrade()

    dropped = [c.args[0] for c in migration.op.drop_table.call_args_list]
    assert dropped[0] == "document"
    assert dropped[-1] == "role"
