"""Project and task routes."""

from __future__ import annotations

from flask import Blueprint, jsonify

from helpers import json_body, project_store, require, require_int

bp = Blueprint("projects", __name__)


@bp.route("/api/projects", methods=["GET"])
def api_projects():
    return jsonify({"projects": [p.to_dict() for p in project_store().get_projects()]})


@bp.route("/api/projects", methods=["POST"])
def api_create_project():
    data = json_body()
    project = project_store().create_project(
        name=require(data, "name"),
        status=data.get("status", "active"),
        priority=data.get("priority", "medium"),
        description=data.get("description"),
        start_date=data.get("start_date"),
        end_date=data.get("end_date"),
    )
    return jsonify(project.to_dict()), 201


@bp.route("/api/projects/<int:project_id>", methods=["DELETE"])
def api_delete_project(project_id: int):
    project_store().delete_project(project_id)
    return jsonify({"success": True})


@bp.route("/api/tasks", methods=["POST"])
def api_create_task():
    data = json_body()
    task = project_store().create_task(
        project_id=require_int(data, "project_id"),
        title=require(data, "title"),
        status=data.get("status", "todo"),
        priority=data.get("priority", "medium"),
        description=data.get("description"),
        due_date=data.get("due_date"),
    )
    return jsonify(task.to_dict()), 201


@bp.route("/api/projects/<int:project_id>/tasks")
def api_tasks_by_project(project_id: int):
    tasks = project_store().get_tasks_by_project(project_id)
    return jsonify({"tasks": [t.to_dict() for t in tasks]})


@bp.route("/api/tasks/<int:task_id>/status", methods=["PATCH"])
def api_update_task_status(task_id: int):
    data = json_body()
    project_store().update_task_status(task_id, require(data, "status"))
    return jsonify({"success": True})
