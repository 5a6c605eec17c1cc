"""Request body field parsing shared by the data resources."""

from datetime import date
from decimal import Decimal, InvalidOperation
from uuid import UUID


def parse_text(value: object, field: str) -> str:
    """String field; missing or null reads as empty."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def parse_date(value: object) -> date | None:
    """ISO date or None for missing/empty values."""
    if value in (None, ""):
        return None
    return date.fromisoformat(str(value))


def parse_uuid(value: object) -> UUID | None:
    """UUID or None for missing/empty values."""
    if value in (None, ""):
        return None
    return UUID(str(value))


def parse_decimal(value: object, field: str) -> Decimal:
    """Decimal from a JSON number or numeric string."""
    if value in (None, "") or isinstance(value, bool):
        raise ValueError(f"{field} is required")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{field} must be a number") from None
    if not result.is_finite():
        raise ValueError(f"{field} must be a number")
    return result
