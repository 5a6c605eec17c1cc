"""Pytest fixtures for BuildTrack tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from buildtrack.domain.entities import (
    Document,
    Expense,
    Material,
    Permission,
    Phase,
    Project,
    Role,
    RolePermission,
    User,
)
from buildtrack.domain.value_objects import PermissionName, RoleOrder

CATALOG = [p.value for p in PermissionName]


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name == name:
                return role
        return None

    async def list_active(self, order_by: RoleOrder = RoleOrder.NEWEST) -> list[Role]:
        items = [r for r in self._by_id.values() if r.is_active]
        if order_by == RoleOrder.NAME:
            return sorted(items, key=lambda r: r.name)
        return sorted(items, key=lambda r: r.created_at, reverse=True)

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = role

    async def deactivate(self, role_id: UUID) -> None:
        role = self._by_id.get(role_id)
        if role:
            self._by_id[role_id] = replace(role, is_active=False)

    def add_role(self, name: str, is_active: bool = True, age_days: int = 0) -> Role:
        """Helper to add role for tests."""
        role = Role(
            id=uuid4(),
            name=name,
            is_active=is_active,
            created_at=datetime.now(UTC) - timedelta(days=age_days),
        )
        self._by_id[role.id] = role
        return role


class FakePermissionRepository:
    """In-memory permission catalog seeded like the initial migration."""

    def __init__(self, names: list[str] | None = None) -> None:
        self._by_id: dict[UUID, Permission] = {}
        for name in names if names is not None else CATALOG:
            p = Permission(id=uuid4(), name=name)
            self._by_id[p.id] = p

    async def list_all(self) -> list[Permission]:
        return sorted(self._by_id.values(), key=lambda p: p.name)

    async def get_by_name(self, name: str) -> Permission | None:
        for p in self._by_id.values():
            if p.name == name:
                return p
        return None


class FakeRolePermissionRepository:
    """In-memory join table; a set keeps pairs unique like the primary key."""

    def __init__(self, permissions: FakePermissionRepository) -> None:
        self._permissions = permissions
        self.pairs: set[RolePermission] = set()

    async def add(self, grant: RolePermission) -> bool:
        if grant in self.pairs:
            return False
        self.pairs.add(grant)
        return True

    async def remove(self, grant: RolePermission) -> bool:
        if grant not in self.pairs:
            return False
        self.pairs.discard(grant)
        return True

    async def list_permission_names(self, role_id: UUID) -> set[str]:
        return {
            self._permissions._by_id[g.permission_id].name
            for g in self.pairs
            if g.role_id == role_id
        }


class FakeUserRepository:
    """In-memory user profile repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        for u in self._by_id.values():
            if u.email == email:
                return u
        return None

    async def list_active(self) -> list[User]:
        items = [u for u in self._by_id.values() if u.active]
        return sorted(items, key=lambda u: u.created_at, reverse=True)

    async def create(self, user: User) -> User:
        self._by_id[user.id] = user
        return user

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user

    async def deactivate(self, user_id: UUID) -> None:
        user = self._by_id.get(user_id)
        if user:
            self._by_id[user_id] = replace(user, active=False)

    async def reassign_role(self, from_role_id: UUID, to_role_id: UUID | None) -> int:
        moved = 0
        for uid, user in list(self._by_id.items()):
            if user.role_id == from_role_id:
                self._by_id[uid] = replace(user, role_id=to_role_id)
                moved += 1
        return moved

    def add_user(
        self,
        name: str,
        role_id: UUID | None = None,
        project_id: UUID | None = None,
        active: bool = True,
    ) -> User:
        """Helper to add user for tests."""
        user = User(
            id=uuid4(),
            name=name,
            email=f"{name.lower().replace(' ', '.')}@example.com",
            role_id=role_id,
            project_id=project_id,
            active=active,
            created_at=datetime.now(UTC),
        )
        self._by_id[user.id] = user
        return user


class FakeProjectRepository:
    """In-memory project repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Project] = {}

    async def get_by_id(self, project_id: UUID) -> Project | None:
        return self._by_id.get(project_id)

    async def list(self, *, search: str | None = None) -> list[Project]:
        items = list(self._by_id.values())
        if search:
            needle = search.lower()
            items = [
                p
                for p in items
                if needle in p.name.lower() or needle in (p.location or "").lower()
            ]
        return sorted(items, key=lambda p: p.created_at, reverse=True)

    async def create(self, project: Project) -> Project:
        self._by_id[project.id] = project
        return project

    async def update(self, project: Project) -> None:
        self._by_id[project.id] = project


class FakePhaseRepository:
    """In-memory phase repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Phase] = {}

    async def get_by_id(self, phase_id: UUID) -> Phase | None:
        return self._by_id.get(phase_id)

    async def list(self, *, project_id: UUID | None = None) -> list[Phase]:
        items = [
            p for p in self._by_id.values() if project_id is None or p.project_id == project_id
        ]
        return sorted(items, key=lambda p: (p.start_date is None, p.start_date, p.name))

    async def list_recent(self, limit: int) -> list[Phase]:
        dated = [p for p in self._by_id.values() if p.end_date]
        undated = [p for p in self._by_id.values() if not p.end_date]
        dated.sort(key=lambda p: p.end_date, reverse=True)
        return (dated + undated)[:limit]

    async def create(self, phase: Phase) -> Phase:
        self._by_id[phase.id] = phase
        return phase

    async def update(self, phase: Phase) -> None:
        self._by_id[phase.id] = phase

    async def delete(self, phase_id: UUID) -> None:
        self._by_id.pop(phase_id, None)


class FakeExpenseRepository:
    """In-memory expense repository."""

    def __init__(self) -> None:
        self._store: list[Expense] = []

    async def list(self) -> list[Expense]:
        return sorted(self._store, key=lambda e: e.date, reverse=True)

    async def list_recent(self, limit: int) -> list[Expense]:
        return (await self.list())[:limit]

    async def create(self, expense: Expense) -> Expense:
        self._store.append(expense)
        return expense

    async def totals_by_category(self) -> dict[str, Decimal]:
        totals: dict[str, Decimal] = {}
        for e in self._store:
            totals[e.category] = totals.get(e.category, Decimal("0")) + e.amount
        return totals


class FakeMaterialRepository:
    """In-memory material repository."""

    def __init__(self) -> None:
        self._store: list[Material] = []

    async def list(self) -> list[Material]:
        return sorted(self._store, key=lambda m: m.name)

    async def create(self, material: Material) -> Material:
        self._store.append(material)
        return material

    async def total_quantity(self) -> int:
        return sum(m.qty_required for m in self._store)


class FakeDocumentRepository:
    """In-memory document metadata repository."""

    def __init__(self) -> None:
        self._store: list[Document] = []

    async def list(self, *, search: str | None = None) -> list[Document]:
        items = self._store
        if search:
            items = [d for d in items if search.lower() in d.name.lower()]
        return sorted(items, key=lambda d: d.upload_date, reverse=True)

    async def create(self, document: Document) -> Document:
        self._store.append(document)
        return document


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.permissions = FakePermissionRepository()
        self.role_permissions = FakeRolePermissionRepository(self.permissions)
        self.users = FakeUserRepository()
        self.projects = FakeProjectRepository()
        self.phases = FakePhaseRepository()
        self.expenses = FakeExpenseRepository()
        self.materials = FakeMaterialRepository()
        self.documents = FakeDocumentRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call, so state persists."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager around ``fake_uow``."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock
