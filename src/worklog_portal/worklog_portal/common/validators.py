from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..core.enums import Rating
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_fields(data: Mapping[str, Any], fields: Iterable[str], message: str = "Missing required fields") -> None:
    """Raise when any of ``fields`` is absent or falsy in ``data``."""
    missing = [f for f in fields if not data.get(f)]
    if missing:
        raise ValidationError(f"{message}: {', '.join(missing)}")


def require_mapping(value: Any, field_name: str) -> dict:
    if not isinstance(value, dict):
        raise ValidationError(f"{field_name} must be an object")
    return value


def require_rating(value: Any, field_name: str) -> Rating:
    try:
        return Rating(value)
    except ValueError:
        allowed = ", ".join(r.value for r in Rating)
        raise ValidationError(f"{field_name} must be one of {allowed}")


def count_red(ratings: Mapping[str, Any]) -> int:
    return sum(1 for v in ratings.values() if v == Rating.RED.value)
