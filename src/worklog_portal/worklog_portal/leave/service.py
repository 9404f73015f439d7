from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, List, Mapping

from ..common.datetime_utils import now_iso, today_iso
from ..common.validators import require_fields, require_non_empty
from ..core.constants import DEFAULT_LEAVE_DAYS
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, StorageError, ValidationError
from .model import LeaveBalance, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leave: LeaveRepository):
        self._leave = leave

    def submit(self, fields: Mapping[str, Any]) -> LeaveRequest:
        require_fields(fields, ("name", "startDate", "leaveType"))
        name = require_non_empty(fields["name"], "name")
        start_date = require_non_empty(fields["startDate"], "startDate")
        leave_type = require_non_empty(fields["leaveType"], "leaveType")

        leave = LeaveRequest(
            request_id=str(uuid.uuid4()),
            name=name,
            start_date=start_date,
            end_date=fields.get("endDate") or start_date,
            leave_type=leave_type,
            days=fields.get("days") or DEFAULT_LEAVE_DAYS,
            reason=fields.get("reason") or "",
            submission_date=fields.get("submissionDate") or today_iso(),
            status=LeaveStatus.PENDING,
            created_at=now_iso(),
            hours=fields.get("hours"),
        )
        self._leave.add_request(leave)
        logger.info("leave request %s submitted by %s (%s)", leave.request_id, leave.name, leave.leave_type)
        return leave

    def list_requests(self) -> List[LeaveRequest]:
        return list(self._leave.list_requests())

    def get_request(self, request_id: str) -> LeaveRequest:
        leave = self._leave.get_request(request_id)
        if not leave:
            raise NotFoundError("Leave request not found")
        return leave

    def update_status(self, *, current_role: Role, request_id: str, status: Any) -> LeaveRequest:
        """Admin decision on a request: Pending -> Approved | Rejected.

        Decided requests are final. Approving charges the request's days to the
        requester's balance as a second write that is not rolled back on failure.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can change leave status")

        try:
            new_status = LeaveStatus(status)
        except ValueError:
            raise ValidationError("Invalid status")

        leave = self.get_request(request_id)
        if leave.status == new_status:
            return leave
        if leave.is_decided:
            raise ValidationError("Leave request already decided")

        updated = replace(leave, status=new_status)
        if not self._leave.update_request(updated):
            raise NotFoundError("Leave request not found")
        logger.info("leave request %s -> %s", request_id, new_status.value)

        if new_status == LeaveStatus.APPROVED:
            try:
                self.record_usage(updated.name, updated.day_count)
            except (ValidationError, StorageError) as e:
                # The approval is already saved; only the balance update failed.
                logger.error("leave request %s approved but balance not charged: %s", request_id, e)
                raise StorageError("Leave approved but balance update failed") from e
        return updated

    def get_balance(self, name: str) -> LeaveBalance:
        """Balance for ``name``; created with the default allotment on first lookup."""
        name = require_non_empty(name, "User name")
        balance = self._leave.get_balance(name)
        if balance is None:
            balance = LeaveBalance(name=name, total_leaves=self._leave.default_total_leaves(), used_leaves=0)
            self._leave.save_balance(balance)
            logger.info("created leave balance for %s", name)
        return balance

    def record_usage(self, name: str, days: float) -> LeaveBalance:
        balance = self.get_balance(name)
        updated = replace(balance, used_leaves=balance.used_leaves + days)
        self._leave.save_balance(updated)
        return updated

    def list_balances(self) -> List[LeaveBalance]:
        return list(self._leave.list_balances())
