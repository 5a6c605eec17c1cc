"""Document entity - metadata of a file kept in object storage."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from buildtrack.domain.value_objects import DocumentCategory


@dataclass
class Document:
    """Project document. ``file_path`` is the object storage key."""

    id: UUID
    name: str
    category: DocumentCategory
    project_id: UUID
    uploaded_by: str
    file_path: str
    upload_date: datetime
    type: str | None = None
    size: str | None = None
    status: str = "pending"
