from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.exceptions import ValidationError

# ISO first; the browser forms also send day-first and US month-first dates.
_DATE_FORMATS = ("%Y-%m-%d", "%d-%m-%Y", "%m-%d-%Y", "%d/%m/%Y", "%m/%d/%Y")


def parse_flexible_date(value: str) -> date:
    """Parse a date string in any of the formats the portal accepts.

    Day-first wins over month-first when both would parse (``01-02-2025`` is 1 Feb).
    """
    v = (value or "").strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Invalid date: {value!r}")


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc).date().isoformat()


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
