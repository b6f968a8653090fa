"""Planner routes: dated events and daily notes."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, jsonify, request

from helpers import json_body, planner_store, require

bp = Blueprint("planner", __name__)


def _date_arg() -> str:
    return request.args.get("date") or date.today().isoformat()


@bp.route("/api/events", methods=["GET"])
def api_events():
    day = _date_arg()
    events = planner_store().get_events_by_date(day)
    return jsonify({"date": day, "events": [e.to_dict() for e in events]})


@bp.route("/api/events", methods=["POST"])
def api_create_event():
    data = json_body()
    event = planner_store().create_event(
        title=require(data, "title"),
        event_date=require(data, "event_date"),
        event_type=data.get("event_type", "event"),
        priority=data.get("priority", "medium"),
        description=data.get("description"),
        start_time=data.get("start_time"),
        end_time=data.get("end_time"),
    )
    return jsonify(event.to_dict()), 201


@bp.route("/api/notes", methods=["GET"])
def api_notes():
    day = _date_arg()
    notes = planner_store().get_notes_by_date(day)
    return jsonify({"date": day, "notes": [n.to_dict() for n in notes]})


@bp.route("/api/notes", methods=["POST"])
def api_create_note():
    data = json_body()
    note = planner_store().create_note(
        title=require(data, "title"),
        content=require(data, "content"),
        note_date=require(data, "note_date"),
        tags=data.get("tags"),
    )
    return jsonify(note.to_dict()), 201
