from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @json_errors(success=False)
    def list_projects():
        projects = container.project_service.list_projects()
        return jsonify({"success": True, "data": [p.to_record() for p in projects]})

    @app.route("/api/projects", methods=["POST"], endpoint="add_project")
    @json_errors(success=False)
    def add_project():
        project = container.project_service.create_project(json_body())
        return jsonify({"success": True, "message": "Project added successfully", "project": project.to_record()})

    @app.route("/api/projects/search", methods=["POST"], endpoint="search_project")
    @json_errors()
    def search_project():
        project = container.project_service.search(json_body())
        return jsonify({"success": True, "project": project.to_record()})

    @app.route("/api/projects/delete", methods=["POST"], endpoint="delete_project")
    @json_errors(success=False)
    def delete_project():
        data = json_body()
        container.project_service.delete_project(data.get("projectNumber"), data.get("projectName"))
        return jsonify({"success": True, "message": "Project deleted successfully"})

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="get_project")
    @json_errors()
    def get_project(project_id: str):
        project = container.project_service.get_project(project_id)
        return jsonify({"project": project.to_record()})

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @json_errors()
    def update_project(project_id: str):
        project = container.project_service.update_project(project_id, json_body())
        return jsonify({"success": True, "message": "Project updated successfully", "project": project.to_record()})

    @app.route("/api/projects/<project_id>/details", methods=["GET"], endpoint="project_details")
    @json_errors(success=False)
    def project_details(project_id: str):
        details = container.project_service.project_details(project_id)
        return jsonify(
            {
                "success": True,
                "project": details.project.to_record(),
                "members": list(details.members),
                "total_hours": details.total_hours,
            }
        )
