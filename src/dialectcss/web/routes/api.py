from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

api_bp = Blueprint("api", __name__)

_DICTIONARY_TABLES = ("elements", "properties", "keywords", "units")


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/compile", methods=["OPTIONS"])
@api_bp.route("/styles", methods=["OPTIONS"])
def preflight():
    """Handle CORS preflight requests."""
    return "", 204


def _session():
    return current_app.extensions["session"]


def _compiler():
    return current_app.extensions["compiler"]


@api_bp.route("/compile", methods=["POST"])
def compile_text():
    """Compile localized text and return canonical CSS plus diagnostics."""
    data = request.get_json(silent=True)
    if not data or "text" not in data:
        return jsonify({"error": "text required"}), 400

    compiler = _compiler()
    options = None
    if "important" in data:
        options = compiler.options.with_changes(use_important=bool(data["important"]))
    result = compiler.compile(str(data["text"]), options)
    payload = result.to_dict()
    payload.pop("rules")
    return jsonify(payload)


@api_bp.route("/styles", methods=["POST"])
def write_style():
    """Record a pending write of one property value."""
    data = request.get_json(silent=True)
    if not data or not data.get("selector") or not data.get("property"):
        return jsonify({"error": "selector and property required"}), 400

    session = _session()
    try:
        session.write(data["selector"], data["property"], str(data.get("value", "")))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({
        "selector": data["selector"],
        "property": data["property"],
        "value": session.effective_value(data["selector"], data["property"]),
        "pending": session.has_pending,
    }), 202


@api_bp.route("/styles", methods=["GET"])
def read_styles():
    """Return the effective styles of a selector, or one property value."""
    selector = request.args.get("selector")
    if not selector:
        return jsonify({"error": "selector required"}), 400

    session = _session()
    prop = request.args.get("property")
    if prop:
        return jsonify({
            "selector": selector,
            "property": prop,
            "value": session.effective_value(selector, prop),
        })
    return jsonify({"selector": selector, "styles": session.effective_styles(selector)})


@api_bp.route("/apply", methods=["POST"])
def apply_styles():
    """Compile committed plus pending styles without committing."""
    result = _session().apply()
    payload = result.to_dict()
    payload.pop("rules")
    return jsonify(payload)


@api_bp.route("/commit", methods=["POST"])
def commit_styles():
    """Promote pending edits to the committed styles."""
    committed = _session().commit()
    return jsonify({"rules": committed.to_dict()})


@api_bp.route("/undo", methods=["POST"])
def undo():
    session = _session()
    changed = session.undo()
    return jsonify({"changed": changed, "pending": session.pending})


@api_bp.route("/redo", methods=["POST"])
def redo():
    session = _session()
    changed = session.redo()
    return jsonify({"changed": changed, "pending": session.pending})


@api_bp.route("/dictionary/<table>")
def dictionary_table(table: str):
    """Return the forward alias map of one dictionary table."""
    if table not in _DICTIONARY_TABLES:
        return jsonify({"error": "not found"}), 404
    alias_table = _compiler().dictionary.table(table)
    return jsonify(dict(alias_table.forward))
