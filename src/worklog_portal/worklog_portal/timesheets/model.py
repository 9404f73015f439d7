from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..common.validators import require_mapping, require_rating
from ..core.enums import Rating
from ..core.exceptions import ValidationError


def _optional_rating(value: Any) -> Optional[Rating]:
    # Rows without a selected status arrive with no progress at all.
    if value is None or value == "":
        return None
    return require_rating(value, "progress")


@dataclass(frozen=True)
class PMEntry:
    """One afternoon row: what was done in an hour and, if rated, how it went."""

    hour: str
    task: str
    progress: Optional[Rating] = None
    comments: str = ""
    projects: Any = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PMEntry":
        data = require_mapping(data, "PM entry")
        return cls(
            hour=str(data.get("hour") or ""),
            task=str(data.get("task") or ""),
            progress=_optional_rating(data.get("progress")),
            comments=str(data.get("comments") or ""),
            projects=data.get("projects") if data.get("projects") is not None else [],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hour": self.hour,
            "task": self.task,
            "progress": self.progress.value if self.progress else None,
            "comments": self.comments,
            "projects": self.projects,
        }


@dataclass(frozen=True)
class TimesheetDay:
    """At most one AM and one PM submission per employee and date.

    PM rows are kept as plain dicts; they are validated through PMEntry on the way in.
    """

    am: Optional[Dict[str, Any]] = None
    pm: Optional[List[Dict[str, Any]]] = None
    country: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "TimesheetDay":
        pm = record.get("PM")
        return cls(
            am=record.get("AM"),
            pm=list(pm) if isinstance(pm, list) else None,
            country=record.get("country"),
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        if self.am is not None:
            record["AM"] = self.am
        if self.pm is not None:
            record["PM"] = list(self.pm)
        if self.country is not None:
            record["country"] = self.country
        return record

    @property
    def am_submitted(self) -> bool:
        return self.am is not None

    @property
    def pm_submitted(self) -> bool:
        return bool(self.pm)


def parse_am_tasks(tasks: Any) -> Dict[str, Any]:
    """AM tasks are a mapping of hour label to task description."""
    return dict(require_mapping(tasks, "tasks"))


def parse_pm_hours(hours: Any) -> List[Dict[str, Any]]:
    if not isinstance(hours, list):
        raise ValidationError("hours must be a list")
    return [PMEntry.from_dict(e).to_dict() for e in hours]
