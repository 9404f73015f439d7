from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_flexible_date, today_iso
from ..core.constants import DEFAULT_EMPLOYEE
from ..core.exceptions import NotFoundError, ValidationError
from .model import TimesheetDay, parse_am_tasks, parse_pm_hours
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimesheetStatus:
    am_submitted: bool
    pm_submitted: bool

    def to_dict(self) -> dict:
        return {"amSubmitted": self.am_submitted, "pmSubmitted": self.pm_submitted}


class TimesheetService:
    """AM/PM task logging keyed by employee identifier and date.

    The employee identifier is whatever the client sends as ``employee_name``
    (an email for logged-in users); it falls back to a shared test identity.
    Dates may arrive in any accepted format and are stored as ``YYYY-MM-DD``.
    """

    def __init__(self, timesheets: TimesheetRepository):
        self._timesheets = timesheets

    @staticmethod
    def _key(employee: Optional[str], work_date: Optional[str]) -> tuple:
        day = parse_flexible_date(work_date).isoformat() if work_date else today_iso()
        return (employee or DEFAULT_EMPLOYEE, day)

    def _day(self, employee: str, work_date: str) -> TimesheetDay:
        return self._timesheets.get_day(employee, work_date) or TimesheetDay()

    def submit_am(
        self,
        *,
        employee: Optional[str],
        work_date: Optional[str],
        tasks: Any,
        country: Optional[str] = None,
    ) -> TimesheetDay:
        """Store the morning plan. A second AM post for the same day overwrites the first."""
        employee, work_date = self._key(employee, work_date)
        am = parse_am_tasks(tasks)

        day = replace(self._day(employee, work_date), am=am, country=country)
        self._timesheets.put_day(employee, work_date, day)
        logger.info("AM timesheet saved for %s on %s", employee, work_date)
        return day

    def submit_pm(
        self,
        *,
        employee: Optional[str],
        work_date: Optional[str],
        hours: Any,
        country: Optional[str] = None,
    ) -> TimesheetDay:
        """Store the afternoon report, overwriting any earlier PM. Country is only filled if unset."""
        employee, work_date = self._key(employee, work_date)
        pm = parse_pm_hours(hours)

        current = self._day(employee, work_date)
        day = replace(current, pm=pm, country=current.country or country)
        self._timesheets.put_day(employee, work_date, day)
        logger.info("PM timesheet saved for %s on %s (%d rows)", employee, work_date, len(pm))
        return day

    def submit_once(self, *, employee: Optional[str], work_date: Optional[str], data: Mapping[str, Any]) -> str:
        """Single-shot submission: fills AM, else PM, and refuses to overwrite either.

        Returns which half was stored ("AM" or "PM").
        """
        employee, work_date = self._key(employee, work_date)
        current = self._day(employee, work_date)

        if data.get("AM") and not current.am_submitted:
            day, half = replace(current, am=parse_am_tasks(data["AM"])), "AM"
        elif data.get("PM") and not current.pm_submitted:
            day, half = replace(current, pm=parse_pm_hours(data["PM"])), "PM"
        else:
            raise ValidationError("Timesheet already submitted for this period")

        self._timesheets.put_day(employee, work_date, day)
        logger.info("%s timesheet saved for %s on %s", half, employee, work_date)
        return half

    def status(self, *, employee: Optional[str], work_date: Optional[str]) -> TimesheetStatus:
        employee, work_date = self._key(employee, work_date)
        if not self._timesheets.exists():
            return TimesheetStatus(am_submitted=False, pm_submitted=False)
        day = self._day(employee, work_date)
        return TimesheetStatus(am_submitted=day.am_submitted, pm_submitted=day.pm_submitted)

    def get_day(self, employee: str, work_date: str) -> TimesheetDay:
        if not self._timesheets.exists():
            raise NotFoundError("No timesheet data found")
        if not self._timesheets.days_for(employee):
            raise NotFoundError("No timesheet found for this user")
        # Entries written before dates were normalized may still sit under the raw key.
        day = self._timesheets.get_day(employee, parse_flexible_date(work_date).isoformat())
        day = day or self._timesheets.get_day(employee, work_date)
        if not day:
            raise NotFoundError("No timesheet found for this date")
        return day
