from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import error_response, json_body, json_errors
from ..container import Container
from .service import UserKey


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    @json_errors()
    def login():
        data = json_body()
        user = container.auth_service.login(data.get("email", ""), data.get("password", ""))

        session.clear()
        session["user_id"] = user.id
        session["email"] = user.email
        session["name"] = user.name
        session["role"] = user.role.value

        return jsonify({"user": user.to_public()})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/session", methods=["GET"], endpoint="api_session")
    def current_session():
        if "user_id" not in session:
            return error_response("Not logged in", 401)
        return jsonify(
            {
                "user": {
                    "id": session["user_id"],
                    "email": session.get("email"),
                    "name": session.get("name"),
                    "role": session.get("role"),
                }
            }
        )

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @json_errors()
    def list_users():
        return jsonify({"users": container.user_service.list_users()})

    @app.route("/api/users", methods=["POST"], endpoint="add_user")
    @json_errors()
    def add_user():
        user = container.user_service.create_user(json_body())
        return jsonify({"message": "User added successfully", "user": user.to_public()})

    def _user_routes(key: UserKey, rule: str, methods: list) -> None:
        def view(value: str):
            if request.method == "PUT":
                user = container.user_service.update_user(key, value, json_body())
            elif request.method == "DELETE":
                user = container.user_service.delete_user(key, value)
            else:
                user = container.user_service.get_user(key, value)
            return jsonify({"user": user.to_public()})

        app.add_url_rule(rule, endpoint=f"user_by_{key.value}", view_func=json_errors()(view), methods=methods)

    _user_routes(UserKey.ID, "/api/users/<value>", ["GET", "PUT", "DELETE"])
    _user_routes(UserKey.EMAIL, "/api/users/email/<value>", ["GET", "PUT"])
    _user_routes(UserKey.NAME, "/api/users/name/<value>", ["GET", "PUT", "DELETE"])

    @app.route("/api/timesheet/showUser", methods=["GET"], endpoint="user_directory")
    @json_errors("Failed to read users data", success=False)
    def user_directory():
        return jsonify({"success": True, "data": container.user_service.list_directory()})

    if not app.config.get("DEBUG"):
        return

    # Raw dump/overwrite of the users file, hashes included. Development only.
    @app.route("/api/debug/users", methods=["GET"], endpoint="debug_users")
    @json_errors()
    def debug_users():
        return jsonify({"users": container.user_service.debug_dump()})

    @app.route("/api/debug/users", methods=["POST"], endpoint="debug_replace_users")
    @json_errors()
    def debug_replace_users():
        users = json_body().get("users")
        if not isinstance(users, list):
            return error_response("users must be a list", 400)
        container.user_service.replace_all(users)
        return jsonify({"message": "Users updated successfully"})
