"""PostgreSQL document repository implementation."""

from __future__ import annotations

from psycopg import AsyncConnection

from buildtrack.domain.entities import Document
from buildtrack.domain.value_objects import DocumentCategory

_COLUMNS = (
    "id, name, category, project_id, uploaded_by, file_path, type, size, status, upload_date"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        name=r[1],
        category=DocumentCategory(r[2]),
        project_id=r[3],
        uploaded_by=r[4],
        file_path=r[5],
        type=r[6],
        size=r[7],
        status=r[8],
        upload_date=r[9],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list(self, *, search: str | None = None) -> list[Document]:
        """List documents, latest upload first, optionally matching name."""
        where = ""
        params: tuple = ()
        if search:
            where = " WHERE name ILIKE %s"
            params = (f"%{search}%",)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document{where} ORDER BY upload_date DESC",
            params,
        )
        rows = await cur.fetchall()
        return [_row_to_document(r) for r in rows]

    async def create(self, document: Document) -> Document:
        """Create document row."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.name,
                document.category.value,
                document.project_id,
                document.uploaded_by,
                document.file_path,
                document.type,
                document.size,
                document.status,
                document.upload_date,
            ),
        )
        return document
