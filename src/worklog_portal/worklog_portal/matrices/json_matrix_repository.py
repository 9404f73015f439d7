from __future__ import annotations

from typing import Mapping

from ..core.enums import Collection
from ..storage.collection import JsonCollection
from ..storage.store import DocumentStore
from .model import PerformanceEntry, SafetyEntry
from .repository import MatrixRepository


class JsonMatrixRepository(MatrixRepository):
    """Performance ratings in ``matrices.json`` and safety checklists in ``safety.json``,
    both shaped ``{employee: {date: entry}}``."""

    def __init__(self, store: DocumentStore):
        self._performance = JsonCollection(store, Collection.MATRICES.value, dict)
        self._safety = JsonCollection(store, Collection.SAFETY.value, dict)

    def performance_for(self, employee: str) -> Mapping[str, PerformanceEntry]:
        days = self._performance.load().get(employee) or {}
        return {d: PerformanceEntry.from_record(r) for d, r in days.items()}

    def put_performance(self, employee: str, work_date: str, entry: PerformanceEntry) -> None:
        document = self._performance.load()
        document.setdefault(employee, {})[work_date] = entry.to_record()
        self._performance.save(document)

    def safety_for(self, employee: str) -> Mapping[str, SafetyEntry]:
        days = self._safety.load().get(employee) or {}
        return {d: SafetyEntry.from_record(employee, d, r) for d, r in days.items()}

    def put_safety(self, entry: SafetyEntry) -> None:
        document = self._safety.load()
        document.setdefault(entry.employee, {})[entry.work_date] = entry.to_record()
        self._safety.save(document)
