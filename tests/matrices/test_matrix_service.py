from __future__ import annotations

import pytest

from src.worklog_portal.worklog_portal.core.exceptions import NotFoundError, ValidationError
from src.worklog_portal.worklog_portal.matrices.json_matrix_repository import JsonMatrixRepository
from src.worklog_portal.worklog_portal.matrices.service import MatrixService

ALL_GREEN = {"PPE worn": "Green", "Area clear": "Green"}


def _service(store) -> MatrixService:
    return MatrixService(JsonMatrixRepository(store))


def test_performance_counts_red_ratings(store):
    svc = _service(store)
    entry = svc.save_performance(
        employee="priya@example.com",
        work_date="2025-01-06",
        ratings={"Quality": "Red", "Speed": "Green", "Teamwork": "Red"},
    )

    assert entry.red_count == 2
    assert store.raw("matrices")["priya@example.com"]["2025-01-06"]["red_count"] == 2


def test_performance_rejects_unknown_rating(store):
    with pytest.raises(ValidationError):
        _service(store).save_performance(employee="p", work_date="2025-01-06", ratings={"Quality": "Purple"})


def test_get_performance_filters_by_date(store):
    svc = _service(store)
    svc.save_performance(employee="p", work_date="2025-01-06", ratings={"Quality": "Green"})
    svc.save_performance(employee="p", work_date="2025-01-07", ratings={"Quality": "Red"})

    assert sorted(svc.get_performance("p")) == ["2025-01-06", "2025-01-07"]
    assert list(svc.get_performance("p", "2025-01-07")) == ["2025-01-07"]
    with pytest.raises(NotFoundError):
        svc.get_performance("p", "2025-02-01")


def test_safety_is_stored_under_iso_date(store):
    entry = _service(store).save_safety(
        employee="john", work_date="06-01-2025", answers={**ALL_GREEN, "Tools tagged": "Red"}, shift="Morning"
    )

    assert entry.checklist_id.startswith("safety-")
    stored = store.raw("safety")["john"]["2025-01-06"]
    assert stored["red_count"] == 1
    assert stored["shift"] == "Morning"


def test_safety_requires_employee(store):
    with pytest.raises(ValidationError):
        _service(store).save_safety(employee="", work_date="2025-01-06", answers=ALL_GREEN)


def test_query_returns_inclusive_range_in_date_order(store):
    svc = _service(store)
    for day in ("2025-01-09", "2025-01-05", "2025-01-07", "2025-01-12"):
        svc.save_safety(employee="john", work_date=day, answers=ALL_GREEN)
    svc.save_safety(employee="mary", work_date="2025-01-07", answers=ALL_GREEN)

    found = svc.query_safety("john", "05-01-2025", "2025-01-09")
    assert [e.work_date for e in found] == ["2025-01-05", "2025-01-07", "2025-01-09"]
    assert found[0].to_dict()["employee_name"] == "john"


def test_query_skips_unreadable_keys(store):
    store.put("safety", {"john": {"someday": {"safety_matrix": ALL_GREEN}, "2025-01-06": {"safety_matrix": ALL_GREEN}}})
    found = _service(store).query_safety("john", "2025-01-01", "2025-01-31")
    assert [e.work_date for e in found] == ["2025-01-06"]


@pytest.mark.parametrize(
    "employee,start,end",
    [(None, "2025-01-01", "2025-01-31"), ("john", None, "2025-01-31"), ("john", "2025-01-01", "")],
)
def test_query_requires_all_parameters(store, employee, start, end):
    with pytest.raises(ValidationError, match="Missing required parameters"):
        _service(store).query_safety(employee, start, end)


def test_query_rejects_reversed_range(store):
    with pytest.raises(ValidationError):
        _service(store).query_safety("john", "2025-01-31", "2025-01-01")


def test_performance_dates_are_normalized(store):
    svc = _service(store)
    svc.save_performance(employee="p", work_date="10-19-2026", ratings={"Quality": "Green"})

    assert list(store.raw("matrices")["p"]) == ["2026-10-19"]
    assert list(svc.get_performance("p", "19/10/2026")) == ["2026-10-19"]
