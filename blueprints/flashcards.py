"""Flashcard due list and review routes."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from helpers import int_arg, json_body, require_int, vocabulary_store

bp = Blueprint("flashcards", __name__)


@bp.route("/api/flashcards/due")
def api_due_flashcards():
    store = vocabulary_store()
    limit = int_arg("limit", current_app.config["DUE_FLASHCARD_LIMIT"])
    due = store.get_due_flashcards(limit)
    return jsonify({
        "cards": [
            {"flashcard": card.to_dict(), "vocabulary": vocab.to_dict()}
            for card, vocab in due
        ],
        "due_count": store.due_count(),
    })


@bp.route("/api/flashcards/<int:flashcard_id>/review", methods=["POST"])
def api_review_flashcard(flashcard_id: int):
    data = json_body()
    quality = require_int(data, "quality")

    store = vocabulary_store()
    store.review_flashcard(flashcard_id, quality)
    return jsonify({"success": True, "flashcard": store.get_flashcard(flashcard_id).to_dict()})
