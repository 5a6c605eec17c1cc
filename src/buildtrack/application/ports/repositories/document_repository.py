"""Document repository port."""

from __future__ import annotations

from typing import Protocol

from buildtrack.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document metadata persistence."""

    async def list(self, *, search: str | None = None) -> list[Document]: ...

    async def create(self, document: Document) -> Document: ...
