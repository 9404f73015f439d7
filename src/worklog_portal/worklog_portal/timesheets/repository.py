from __future__ import annotations

from typing import Mapping, Optional, Protocol

from .model import TimesheetDay


class TimesheetRepository(Protocol):
    def exists(self) -> bool:
        raise NotImplementedError

    def days_for(self, employee: str) -> Optional[Mapping[str, TimesheetDay]]:
        """All days for an employee keyed by date, or None if the employee has none."""

        raise NotImplementedError

    def get_day(self, employee: str, work_date: str) -> Optional[TimesheetDay]:
        raise NotImplementedError

    def put_day(self, employee: str, work_date: str, day: TimesheetDay) -> None:
        raise NotImplementedError
