from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

_KNOWN_FIELDS = ("id", "projectNumber", "projectName", "startDate", "endDate", "createdAt")


@dataclass(frozen=True)
class Project:
    """Domain entity: Project. Unknown fields ride along in ``extra``."""

    id: str
    project_number: str
    project_name: str
    start_date: str = ""
    end_date: str = ""
    created_at: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Project":
        return cls(
            id=str(record.get("id") or ""),
            project_number=str(record.get("projectNumber") or ""),
            project_name=str(record.get("projectName") or ""),
            start_date=record.get("startDate") or "",
            end_date=record.get("endDate") or "",
            created_at=record.get("createdAt") or "",
            extra={k: v for k, v in record.items() if k not in _KNOWN_FIELDS},
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.id,
            "projectNumber": self.project_number,
            "projectName": self.project_name,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }
        if self.created_at:
            record["createdAt"] = self.created_at
        record.update(self.extra)
        return record

    def matches_key(self, key: str) -> bool:
        """Loose lookup used by the details page: id, project number or project name."""
        return key in (self.id, self.project_number, self.project_name)
