"""Personal vault routes. Values are returned in plaintext."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from helpers import json_body, optional_bool, require, vault_store

bp = Blueprint("vault", __name__)


@bp.route("/api/vault/accounts", methods=["GET"])
def api_accounts():
    store = vault_store()
    category = request.args.get("category")
    if category:
        accounts = store.get_personal_accounts_by_category(category)
    else:
        accounts = store.get_personal_accounts()
    return jsonify({"accounts": [a.to_dict() for a in accounts]})


@bp.route("/api/vault/accounts", methods=["POST"])
def api_create_account():
    data = json_body()
    account = vault_store().create_personal_account(
        title=require(data, "title"),
        email=require(data, "email"),
        password=require(data, "password"),
        category=data.get("category", "email"),
        website=data.get("website"),
        notes=data.get("notes"),
    )
    return jsonify(account.to_dict()), 201


@bp.route("/api/vault/info", methods=["GET"])
def api_info():
    store = vault_store()
    category = request.args.get("category")
    if category:
        entries = store.get_personal_info_by_category(category)
    else:
        entries = store.get_personal_info()
    return jsonify({"info": [i.to_dict() for i in entries]})


@bp.route("/api/vault/info", methods=["POST"])
def api_create_info():
    data = json_body()
    info = vault_store().create_personal_info(
        title=require(data, "title"),
        content=require(data, "content"),
        category=data.get("category", "general"),
        is_sensitive=optional_bool(data, "is_sensitive"),
    )
    return jsonify(info.to_dict()), 201
