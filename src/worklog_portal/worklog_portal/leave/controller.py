from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_body, json_errors
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    def _current_role() -> Role:
        try:
            return Role(session.get("role") or Role.USER.value)
        except ValueError:
            return Role.USER

    @app.route("/api/leave-request", methods=["POST"], endpoint="submit_leave")
    @json_errors("Failed to submit leave request")
    def submit_leave():
        leave = container.leave_service.submit(json_body())
        return jsonify({"message": "Leave request submitted successfully", "data": leave.to_record()}), 201

    @app.route("/api/leave-request", methods=["GET"], endpoint="list_leave_requests")
    @json_errors("Failed to fetch leave requests")
    def list_leave_requests():
        return jsonify([r.to_record() for r in container.leave_service.list_requests()])

    @app.route("/api/leave-request/<request_id>/status", methods=["GET"], endpoint="get_leave_request")
    @json_errors("Failed to fetch leave request")
    def get_leave_request(request_id: str):
        return jsonify(container.leave_service.get_request(request_id).to_record())

    @app.route("/api/leave-request/<request_id>/status", methods=["PUT"], endpoint="update_leave_status")
    @json_errors("Failed to update status")
    def update_leave_status(request_id: str):
        leave = container.leave_service.update_status(
            current_role=_current_role(),
            request_id=request_id,
            status=json_body().get("status"),
        )
        return jsonify({"message": "Status updated successfully", "leaveRequest": leave.to_record()})

    @app.route("/api/leave-request/available/<name>", methods=["GET"], endpoint="leave_available")
    @json_errors("Failed to get leave data")
    def leave_available(name: str):
        return jsonify(container.leave_service.get_balance(name).to_dict())

    @app.route("/api/leave-balances", methods=["GET"], endpoint="leave_balances")
    @json_errors("Failed to fetch leave balances")
    def leave_balances():
        return jsonify([b.to_dict() for b in container.leave_service.list_balances()])
