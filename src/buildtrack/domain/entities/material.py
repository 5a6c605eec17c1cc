"""Material entity."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass
class Material:
    """Material required on site and where it comes from."""

    id: UUID
    name: str
    qty_required: int
    unit_cost: Decimal
    vendor: str
