from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..common.validators import count_red, require_mapping, require_rating


def parse_ratings(ratings: Any, field_name: str = "ratings") -> Dict[str, str]:
    """Validate a ``{criterion: Green|Yellow|Red}`` mapping and return it with plain string values."""
    ratings = require_mapping(ratings, field_name)
    return {str(k): require_rating(v, str(k)).value for k, v in ratings.items()}


@dataclass(frozen=True)
class PerformanceEntry:
    criteria: Mapping[str, str]

    @property
    def red_count(self) -> int:
        return count_red(self.criteria)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PerformanceEntry":
        return cls(criteria=dict(record.get("criteria") or {}))

    def to_record(self) -> Dict[str, Any]:
        return {"criteria": dict(self.criteria), "red_count": self.red_count}


@dataclass(frozen=True)
class SafetyEntry:
    employee: str
    work_date: str
    safety_matrix: Mapping[str, str]
    shift: str = ""
    checklist_id: str = ""
    submitted_at: str = ""

    @property
    def red_count(self) -> int:
        return count_red(self.safety_matrix)

    @classmethod
    def from_record(cls, employee: str, work_date: str, record: Mapping[str, Any]) -> "SafetyEntry":
        return cls(
            employee=employee,
            work_date=work_date,
            safety_matrix=dict(record.get("safety_matrix") or {}),
            shift=record.get("shift") or "",
            checklist_id=record.get("checklist_id") or "",
            submitted_at=record.get("submittedAt") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "shift": self.shift,
            "safety_matrix": dict(self.safety_matrix),
            "red_count": self.red_count,
            "checklist_id": self.checklist_id,
            "submittedAt": self.submitted_at,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.work_date,
            "employee_name": self.employee,
            "shift": self.shift,
            "safety_matrix": dict(self.safety_matrix),
            "red_count": self.red_count,
        }
