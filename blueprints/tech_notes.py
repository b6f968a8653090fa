"""Tech space and code snippet routes."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from helpers import int_arg, json_body, require, require_int, tech_notes_store

bp = Blueprint("tech_notes", __name__)


@bp.route("/api/tech-spaces", methods=["GET"])
def api_tech_spaces():
    spaces = tech_notes_store().get_tech_spaces()
    return jsonify({"tech_spaces": [s.to_dict() for s in spaces]})


@bp.route("/api/tech-spaces", methods=["POST"])
def api_create_tech_space():
    data = json_body()
    space = tech_notes_store().create_tech_space(
        name=require(data, "name"),
        icon=require(data, "icon"),
        description=data.get("description"),
    )
    return jsonify(space.to_dict()), 201


@bp.route("/api/tech-spaces/<int:tech_space_id>", methods=["DELETE"])
def api_delete_tech_space(tech_space_id: int):
    tech_notes_store().delete_tech_space(tech_space_id)
    return jsonify({"success": True})


@bp.route("/api/snippets", methods=["POST"])
def api_create_snippet():
    data = json_body()
    snippet = tech_notes_store().create_code_snippet(
        tech_space_id=require_int(data, "tech_space_id"),
        title=require(data, "title"),
        code=require(data, "code"),
        language=require(data, "language"),
        description=data.get("description"),
        tags=data.get("tags"),
    )
    return jsonify(snippet.to_dict()), 201


@bp.route("/api/tech-spaces/<int:tech_space_id>/snippets")
def api_snippets_by_space(tech_space_id: int):
    snippets = tech_notes_store().get_code_snippets_by_tech_space(tech_space_id)
    return jsonify({"snippets": [s.to_dict() for s in snippets]})


@bp.route("/api/snippets/search")
def api_search_snippets():
    query = request.args.get("q", "")
    limit = int_arg("limit", current_app.config["SEARCH_LIMIT"])
    snippets = tech_notes_store().search_code_snippets(query, limit)
    return jsonify({"snippets": [s.to_dict() for s in snippets], "query": query})
