from __future__ import annotations

from typing import Mapping, Protocol

from .model import PerformanceEntry, SafetyEntry


class MatrixRepository(Protocol):
    def performance_for(self, employee: str) -> Mapping[str, PerformanceEntry]:
        """Entries keyed by date; empty when the employee has none."""

        raise NotImplementedError

    def put_performance(self, employee: str, work_date: str, entry: PerformanceEntry) -> None:
        raise NotImplementedError

    def safety_for(self, employee: str) -> Mapping[str, SafetyEntry]:
        raise NotImplementedError

    def put_safety(self, entry: SafetyEntry) -> None:
        raise NotImplementedError
