"""Language and vocabulary routes."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from helpers import int_arg, json_body, language_store, require, require_int, vocabulary_store

bp = Blueprint("language", __name__)


@bp.route("/api/languages", methods=["GET"])
def api_languages():
    return jsonify({"languages": [lang.to_dict() for lang in language_store().get_languages()]})


@bp.route("/api/languages", methods=["POST"])
def api_create_language():
    data = json_body()
    language = language_store().create_language(
        name=require(data, "name"),
        code=require(data, "code"),
        flag_emoji=require(data, "flag_emoji"),
    )
    return jsonify(language.to_dict()), 201


@bp.route("/api/languages/<int:language_id>", methods=["DELETE"])
def api_delete_language(language_id: int):
    language_store().delete_language(language_id)
    return jsonify({"success": True})


@bp.route("/api/vocabulary", methods=["POST"])
def api_create_vocabulary():
    data = json_body()
    vocab = vocabulary_store().create_vocabulary(
        language_id=require_int(data, "language_id"),
        word=require(data, "word"),
        translation=require(data, "translation"),
        pronunciation=data.get("pronunciation"),
        example_sentence=data.get("example_sentence"),
        difficulty_level=data.get("difficulty_level", 1),
    )
    return jsonify(vocab.to_dict()), 201


@bp.route("/api/languages/<int:language_id>/vocabulary")
def api_vocabulary_by_language(language_id: int):
    entries = vocabulary_store().get_vocabulary_by_language(language_id)
    return jsonify({"vocabulary": [v.to_dict() for v in entries]})


@bp.route("/api/vocabulary/search")
def api_search_vocabulary():
    query = request.args.get("q", "")
    limit = int_arg("limit", current_app.config["SEARCH_LIMIT"])
    entries = vocabulary_store().search_vocabulary(query, limit)
    return jsonify({"vocabulary": [v.to_dict() for v in entries], "query": query})
