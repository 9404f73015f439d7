from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    name: str
    start_date: str
    end_date: str
    leave_type: str
    days: Any
    reason: str
    submission_date: str
    status: LeaveStatus
    created_at: str
    hours: Optional[Any] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "LeaveRequest":
        try:
            status = LeaveStatus(record.get("status") or LeaveStatus.PENDING.value)
        except ValueError:
            status = LeaveStatus.PENDING
        return cls(
            request_id=str(record.get("id") or ""),
            name=record.get("name") or "",
            start_date=record.get("startDate") or "",
            end_date=record.get("endDate") or record.get("startDate") or "",
            leave_type=record.get("leaveType") or "",
            days=record.get("days", 1),
            reason=record.get("reason") or "",
            submission_date=record.get("submissionDate") or "",
            status=status,
            created_at=record.get("createdAt") or "",
            hours=record.get("hours"),
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.request_id,
            "name": self.name,
            "days": self.days,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "leaveType": self.leave_type,
            "reason": self.reason,
            "submissionDate": self.submission_date,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.hours is not None:
            record["hours"] = self.hours
        return record

    @property
    def is_decided(self) -> bool:
        return self.status != LeaveStatus.PENDING

    @property
    def day_count(self) -> float:
        try:
            return float(self.days)
        except (TypeError, ValueError):
            return 0.0


@dataclass(frozen=True)
class LeaveBalance:
    name: str
    total_leaves: float
    used_leaves: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "LeaveBalance":
        return cls(
            name=record.get("name") or "",
            total_leaves=record.get("totalLeaves") or 0,
            used_leaves=record.get("usedLeaves") or 0,
        )

    def to_record(self) -> Dict[str, Any]:
        return {"name": self.name, "totalLeaves": self.total_leaves, "usedLeaves": self.used_leaves}

    @property
    def remaining_leaves(self) -> float:
        return self.total_leaves - self.used_leaves

    def to_dict(self) -> Dict[str, Any]:
        return {**self.to_record(), "remainingLeaves": self.remaining_leaves}
