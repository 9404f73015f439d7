from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _employee(data: dict):
        return data.get("employee_name") or session.get("email")

    @app.route("/api/AM", methods=["POST"], endpoint="submit_am")
    @json_errors()
    def submit_am():
        data = json_body()
        container.timesheet_service.submit_am(
            employee=_employee(data),
            work_date=data.get("date"),
            tasks=data.get("tasks"),
            country=data.get("country"),
        )
        return jsonify({"message": "AM Timesheet saved successfully"})

    @app.route("/api/PM", methods=["POST"], endpoint="submit_pm")
    @json_errors()
    def submit_pm():
        data = json_body()
        container.timesheet_service.submit_pm(
            employee=_employee(data),
            work_date=data.get("date"),
            hours=data.get("hours"),
            country=data.get("country"),
        )
        return jsonify({"message": "PM Timesheet saved successfully"})

    @app.route("/api/timesheet", methods=["POST"], endpoint="submit_timesheet")
    @json_errors()
    def submit_timesheet():
        data = json_body()
        container.timesheet_service.submit_once(employee=_employee(data), work_date=data.get("date"), data=data)
        return jsonify({"message": "Timesheet saved successfully"})

    @app.route("/api/timesheet/status", methods=["GET"], endpoint="timesheet_status")
    @json_errors()
    def timesheet_status():
        status = container.timesheet_service.status(
            employee=_employee(request.args),
            work_date=request.args.get("date"),
        )
        return jsonify(status.to_dict())

    @app.route("/api/timesheet/user/<username>/<work_date>", methods=["GET"], endpoint="timesheet_for_day")
    @json_errors()
    def timesheet_for_day(username: str, work_date: str):
        day = container.timesheet_service.get_day(username, work_date)
        return jsonify(day.to_record())
