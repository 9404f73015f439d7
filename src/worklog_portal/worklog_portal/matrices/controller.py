from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_errors
from ..container import Container
from ..core.constants import SAFETY_QUESTIONS


def register(app: Flask, container: Container) -> None:
    @app.route("/api/matrices", methods=["POST"], endpoint="save_matrices")
    @json_errors()
    def save_matrices():
        data = json_body()
        # Old clients post the ratings mapping as the whole body.
        ratings = data.get("ratings")
        if ratings is None:
            ratings = {k: v for k, v in data.items() if k not in ("email", "date")}

        container.matrix_service.save_performance(
            employee=data.get("email"),
            work_date=data.get("date"),
            ratings=ratings,
        )
        return jsonify({"message": "Matrices saved successfully"})

    @app.route("/api/matrices", methods=["GET"], endpoint="get_matrices")
    @json_errors()
    def get_matrices():
        entries = container.matrix_service.get_performance(request.args.get("email", ""), request.args.get("date"))
        return jsonify({"success": True, "data": entries})

    @app.route("/api/safety/questions", methods=["GET"], endpoint="safety_questions")
    def safety_questions():
        return jsonify({"success": True, "data": list(SAFETY_QUESTIONS)})

    @app.route("/api/safety", methods=["POST"], endpoint="submit_safety")
    @json_errors("Failed to process safety checklist", success=False)
    def submit_safety():
        data = json_body()
        entry = container.matrix_service.save_safety(
            employee=data.get("employee_name"),
            work_date=data.get("date"),
            answers=data.get("safety_ratings", data.get("safety_matrix")),
            shift=data.get("shift"),
        )
        return jsonify(
            {
                "success": True,
                "message": "Safety checklist received and processed successfully",
                "checklist_id": entry.checklist_id,
                "timestamp": entry.submitted_at,
            }
        )

    @app.route("/api/safety", methods=["GET"], endpoint="query_safety")
    @json_errors("Failed to retrieve safety data", success=False)
    def query_safety():
        entries = container.matrix_service.query_safety(
            request.args.get("employee_name"),
            request.args.get("start_date"),
            request.args.get("end_date"),
        )
        return jsonify(
            {
                "success": True,
                "message": "Safety checklist data retrieved successfully",
                "data": [e.to_dict() for e in entries],
            }
        )
