from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/settings", methods=["GET"], endpoint="get_settings")
    @json_errors()
    def get_settings():
        return jsonify(container.settings_service.get())

    @app.route("/api/admin/settings", methods=["POST"], endpoint="save_settings")
    @json_errors()
    def save_settings():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return error_response("Settings must be a JSON object", 400)
        container.settings_service.save(data)
        return jsonify({"message": "Settings updated successfully"})
