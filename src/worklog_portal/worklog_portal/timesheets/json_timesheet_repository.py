from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..core.enums import Collection
from ..storage.collection import JsonCollection
from ..storage.store import DocumentStore
from .model import TimesheetDay
from .repository import TimesheetRepository


class JsonTimesheetRepository(TimesheetRepository):
    """``{employee: {date: {"AM": ..., "PM": [...], "country": ...}}}`` in one document."""

    def __init__(self, store: DocumentStore):
        self._timesheets = JsonCollection(store, Collection.TIMESHEETS.value, dict)

    def exists(self) -> bool:
        return self._timesheets.exists()

    def days_for(self, employee: str) -> Optional[Mapping[str, TimesheetDay]]:
        days = self._timesheets.load().get(employee)
        if not days:
            return None
        return {d: TimesheetDay.from_record(rec) for d, rec in days.items()}

    def get_day(self, employee: str, work_date: str) -> Optional[TimesheetDay]:
        record = self._timesheets.load().get(employee, {}).get(work_date)
        return TimesheetDay.from_record(record) if record else None

    def put_day(self, employee: str, work_date: str, day: TimesheetDay) -> None:
        document: Dict[str, dict] = self._timesheets.load()
        document.setdefault(employee, {})[work_date] = day.to_record()
        self._timesheets.save(document)
