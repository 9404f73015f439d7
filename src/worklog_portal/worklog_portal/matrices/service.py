from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import now_iso, parse_flexible_date, today_iso
from ..core.constants import DEFAULT_EMPLOYEE
from ..core.exceptions import NotFoundError, ValidationError
from .model import PerformanceEntry, SafetyEntry, parse_ratings
from .repository import MatrixRepository

logger = logging.getLogger(__name__)


class MatrixService:
    """Daily performance matrices and safety checklists, both rated Green/Yellow/Red."""

    def __init__(self, matrices: MatrixRepository):
        self._matrices = matrices

    def save_performance(self, *, employee: Optional[str], work_date: Optional[str], ratings: Any) -> PerformanceEntry:
        employee = employee or DEFAULT_EMPLOYEE
        work_date = parse_flexible_date(work_date).isoformat() if work_date else today_iso()
        entry = PerformanceEntry(criteria=parse_ratings(ratings))

        self._matrices.put_performance(employee, work_date, entry)
        logger.info("performance matrix saved for %s on %s (red=%d)", employee, work_date, entry.red_count)
        return entry

    def get_performance(self, employee: str, work_date: Optional[str] = None) -> Dict[str, Any]:
        """All of an employee's entries keyed by date, or just one date when given."""
        if not employee:
            raise ValidationError("email is required")
        entries = self._matrices.performance_for(employee)
        if work_date:
            day = parse_flexible_date(work_date).isoformat()
            entries = {day: entries[day]} if day in entries else {}
        if not entries:
            raise NotFoundError("No performance matrix found")
        return {d: e.to_record() for d, e in entries.items()}

    def save_safety(
        self,
        *,
        employee: Optional[str],
        work_date: Optional[str],
        answers: Any,
        shift: Optional[str] = None,
    ) -> SafetyEntry:
        if not employee:
            raise ValidationError("employee_name is required")
        day = parse_flexible_date(work_date).isoformat() if work_date else today_iso()

        entry = SafetyEntry(
            employee=employee,
            work_date=day,
            safety_matrix=parse_ratings(answers, "safety_ratings"),
            shift=shift or "",
            checklist_id=f"safety-{uuid.uuid4().hex[:12]}",
            submitted_at=now_iso(),
        )
        self._matrices.put_safety(entry)
        logger.info("safety checklist %s saved for %s on %s", entry.checklist_id, employee, day)
        return entry

    def query_safety(self, employee: Optional[str], start_date: Optional[str], end_date: Optional[str]) -> List[SafetyEntry]:
        """Entries for ``employee`` with ``start_date <= date <= end_date``, oldest first."""
        if not employee or not start_date or not end_date:
            raise ValidationError(
                "Missing required parameters: employee_name, start_date, and end_date are required"
            )
        start = parse_flexible_date(start_date)
        end = parse_flexible_date(end_date)
        if end < start:
            raise ValidationError("end_date must not be before start_date")

        found = []
        for key, entry in self._matrices.safety_for(employee).items():
            try:
                day = parse_flexible_date(key)
            except ValidationError:
                logger.warning("skipping safety entry with unreadable date %r for %s", key, employee)
                continue
            if start <= day <= end:
                found.append((day, entry))

        found.sort(key=lambda pair: pair[0])
        return [entry for _, entry in found]
