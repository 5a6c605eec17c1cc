"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from buildtrack.domain.exceptions import GatewayError
from buildtrack.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from buildtrack.infrastructure.persistence.postgres.expense_repository import (
    PostgresExpenseRepository,
)
from buildtrack.infrastructure.persistence.postgres.material_repository import (
    PostgresMaterialRepository,
)
from buildtrack.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from buildtrack.infrastructure.persistence.postgres.phase_repository import (
    PostgresPhaseRepository,
)
from buildtrack.infrastructure.persistence.postgres.project_repository import (
    PostgresProjectRepository,
)
from buildtrack.infrastructure.persistence.postgres.role_permission_repository import (
    PostgresRolePermissionRepository,
)
from buildtrack.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from buildtrack.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn)
        self._permissions = PostgresPermissionRepository(self._conn)
        self._role_permissions = PostgresRolePermissionRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        self._projects = PostgresProjectRepository(self._conn)
        self._phases = PostgresPhaseRepository(self._conn)
        self._expenses = PostgresExpenseRepository(self._conn)
        self._materials = PostgresMaterialRepository(self._conn)
        self._documents = PostgresDocumentRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def role_permissions(self) -> PostgresRolePermissionRepository:
        return self._role_permissions

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def projects(self) -> PostgresProjectRepository:
        return self._projects

    @property
    def phases(self) -> PostgresPhaseRepository:
        return self._phases

    @property
    def expenses(self) -> PostgresExpenseRepository:
        return self._expenses

    @property
    def materials(self) -> PostgresMaterialRepository:
        return self._materials

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver errors leave the transaction rolled back and surface as GatewayError
    with the driver's message.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            logger.error("Database call failed: %s", e)
            raise GatewayError(str(e)) from e

    return factory
