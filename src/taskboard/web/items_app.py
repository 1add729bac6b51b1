"""
Item Service
------------
Flask app serving a flat list of items stored in a single SQLite table.

Routes:
    GET  /        → HTML list of all items, ordered by id
    POST /add     → form field newItem            → redirect /
    POST /edit    → form fields newTitle, newId   → redirect /
    POST /delete  → form field deleteItem         → redirect /
    GET  /health  → JSON: { status, db }

Every mutating route runs exactly one SQL statement. Storage errors are
logged and answered with 500; invalid form input is answered with 400
before anything is written.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from flask import Blueprint, Flask, current_app, jsonify, redirect, render_template_string, request, url_for

from ..errors import ItemValidationError
from ..repositories import ItemRepository

logger = logging.getLogger(__name__)

EXTENSION_KEY = "taskboard.items"

LIST_TITLE = "Today"

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ list_title }}</title>
</head>
<body>
  <h1>{{ list_title }}</h1>
  <ul id="items">
    {% for item in list_items %}
    <li>
      <form action="/delete" method="post" class="delete-form">
        <button type="submit" name="deleteItem" value="{{ item.id }}">&#10003;</button>
      </form>
      <span class="item-title">{{ item.title or "" }}</span>
      <form action="/edit" method="post" class="edit-form">
        <input type="hidden" name="newId" value="{{ item.id }}">
        <input type="text" name="newTitle" value="{{ item.title or '' }}" autocomplete="off">
        <button type="submit">Save</button>
      </form>
    </li>
    {% endfor %}
  </ul>
  <form action="/add" method="post" class="add-form">
    <input type="text" name="newItem" placeholder="New Item" autocomplete="off" autofocus>
    <button type="submit">+</button>
  </form>
</body>
</html>
"""

bp = Blueprint("items", __name__)


def _repository() -> ItemRepository:
    return current_app.extensions[EXTENSION_KEY]


def _parse_id(raw: str | None) -> int:
    """Parse an item id from a form field."""
    try:
        return int(raw or "")
    except ValueError as e:
        raise ItemValidationError(f"Invalid item id: {raw!r}") from e


@bp.errorhandler(ItemValidationError)
def _bad_request(error: ItemValidationError):
    logger.warning("Rejected request to %s: %s", request.path, error)
    return str(error), 400


@bp.errorhandler(sqlite3.Error)
def _storage_error(error: sqlite3.Error):
    logger.exception("Storage error on %s: %s", request.path, error)
    return "Storage error", 500


@bp.route("/")
def index():
    items = _repository().list_all()
    return render_template_string(PAGE, list_title=LIST_TITLE, list_items=items)


@bp.route("/add", methods=["POST"])
def add_item():
    title = request.form.get("newItem", "")
    if not title.strip():
        raise ItemValidationError("Item title required")
    _repository().add(title)
    return redirect(url_for("items.index"))


@bp.route("/edit", methods=["POST"])
def edit_item():
    item_id = _parse_id(request.form.get("newId"))
    _repository().update(item_id, request.form.get("newTitle", ""))
    return redirect(url_for("items.index"))


@bp.route("/delete", methods=["POST"])
def delete_item():
    item_id = _parse_id(request.form.get("deleteItem"))
    _repository().delete(item_id)
    return redirect(url_for("items.index"))


@bp.route("/health")
def health():
    return jsonify({"status": "ok", "db": _repository().db_path})


def create_app(db_path: str | Path) -> Flask:
    """Build the item service app backed by the SQLite file at ``db_path``."""
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = ItemRepository(db_path)
    app.register_blueprint(bp)
    logger.info("Item service using %s", db_path)
    return app


def serve(db_path: str | Path, host: str = "127.0.0.1", port: int = 3000) -> None:
    """Run the item service with Flask's built-in server."""
    app = create_app(db_path)
    logger.info("Item service listening on %s:%d", host, port)
    app.run(host=host, port=port, debug=False, threaded=True)
