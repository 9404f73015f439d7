from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_TOTAL_LEAVES
from ..core.enums import Collection
from ..storage.bootstrap import default_leave_data
from ..storage.collection import JsonCollection
from ..storage.store import DocumentStore
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository


class JsonLeaveRepository(LeaveRepository):
    """Requests live in ``leave-requests.json`` (array); balances in ``leave-data.json``."""

    def __init__(self, store: DocumentStore):
        self._requests = JsonCollection(store, Collection.LEAVE_REQUESTS.value, list)
        self._balances = JsonCollection(store, Collection.LEAVE_DATA.value, default_leave_data)

    def _request_records(self) -> List[dict]:
        return list(self._requests.load_or_initialize())

    def list_requests(self) -> Sequence[LeaveRequest]:
        return [LeaveRequest.from_record(r) for r in self._request_records()]

    def get_request(self, request_id: str) -> Optional[LeaveRequest]:
        for r in self._request_records():
            if r.get("id") == request_id:
                return LeaveRequest.from_record(r)
        return None

    def add_request(self, leave: LeaveRequest) -> None:
        records = self._request_records()
        records.append(leave.to_record())
        self._requests.save(records)

    def update_request(self, leave: LeaveRequest) -> bool:
        records = self._request_records()
        for i, r in enumerate(records):
            if r.get("id") == leave.request_id:
                records[i] = {**r, **leave.to_record()}
                self._requests.save(records)
                return True
        return False

    def default_total_leaves(self) -> float:
        return self._balances.load_or_initialize().get("defaultTotalLeaves", DEFAULT_TOTAL_LEAVES)

    def list_balances(self) -> Sequence[LeaveBalance]:
        data = self._balances.load_or_initialize()
        return [LeaveBalance.from_record(u) for u in data.get("users", [])]

    def get_balance(self, name: str) -> Optional[LeaveBalance]:
        for u in self._balances.load_or_initialize().get("users", []):
            if u.get("name") == name:
                return LeaveBalance.from_record(u)
        return None

    def save_balance(self, balance: LeaveBalance) -> None:
        data = self._balances.load_or_initialize()
        users = data.setdefault("users", [])
        for i, u in enumerate(users):
            if u.get("name") == balance.name:
                users[i] = {**u, **balance.to_record()}
                break
        else:
            users.append(balance.to_record())
        self._balances.save(data)
