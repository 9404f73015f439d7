from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LeaveBalance, LeaveRequest


class LeaveRepository(Protocol):
    # Leave requests
    def list_requests(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get_request(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def add_request(self, leave: LeaveRequest) -> None:
        raise NotImplementedError

    def update_request(self, leave: LeaveRequest) -> bool:
        raise NotImplementedError

    # Balances
    def default_total_leaves(self) -> float:
        raise NotImplementedError

    def list_balances(self) -> Sequence[LeaveBalance]:
        raise NotImplementedError

    def get_balance(self, name: str) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def save_balance(self, balance: LeaveBalance) -> None:
        """Insert or replace the balance row for ``balance.name``."""

        raise NotImplementedError
